from helium_logger.formatting.tokens import (
    FormatValue,
    MetadataFormatValue,
    lookup_format_value,
    lookup_metadata_format_value,
    lookup_token,
)


def test_core_vocabulary_spellings():
    assert [value.value for value in FormatValue.all()] == [
        "(%msg)",
        "(%func)",
        "(%line)",
        "(%file)",
        "(%type)",
        "(%date)",
    ]
    assert all(value.kind == "core" for value in FormatValue.all())


def test_metadata_vocabulary_spellings():
    assert [value.value for value in MetadataFormatValue.all()] == ["(%metadata)", "(%label)"]
    assert all(value.kind == "metadata" for value in MetadataFormatValue.all())


def test_vocabularies_are_disjoint():
    core = {value.value for value in FormatValue.all()}
    metadata = {value.value for value in MetadataFormatValue.all()}
    assert not core & metadata
    assert lookup_format_value("(%label)") is None
    assert lookup_metadata_format_value("(%msg)") is None


def test_lookup_is_exact_and_case_sensitive():
    assert lookup_token("(%msg)") is FormatValue.MESSAGE
    assert lookup_token("(%label)") is MetadataFormatValue.LABEL
    assert lookup_token("(%MSG)") is None
    assert lookup_token("%msg") is None
    assert lookup_token("(%msg) ") is None
