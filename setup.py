from setuptools import setup, find_packages
setup(
  name = 'helium_logger',         # How you named your package folder
  packages = find_packages(exclude=['tests', 'tests.*']),
  version = '0.1',      # Start with a small number and increase it with every change you make
  license='Apache-2.0',
  description = 'Lightweight colorized console logger with user-defined line templates',
  keywords = ['logging', 'logger', 'console', 'loguru'],
  python_requires='>=3.9',
  install_requires=[
          'loguru>=0.6.0',
          'tzdata>=2023.3',
      ],
  extras_require={
          'test': ['pytest>=7.0'],
      },
  classifiers=[
    'Development Status :: 3 - Alpha',
    'Intended Audience :: Developers',
    'Topic :: System :: Logging',
    'License :: OSI Approved :: Apache Software License',
    'Programming Language :: Python :: 3',
    'Programming Language :: Python :: 3.9',
    'Programming Language :: Python :: 3.10',
    'Programming Language :: Python :: 3.11',
  ],
)
