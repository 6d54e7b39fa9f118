from setuptools import setup

setup(
    name='progopts',
    version='0.1.0',
    description='A small engine for parsing program options',
    license='MIT',
    packages=['progopts'],
    python_requires='>=3.9',
    install_requires=[
        'typing_extensions>=4.4',
    ],
    extras_require={
        'test': [
            'pytest',
            'sybil',
        ],
    },
)
