from setuptools import setup, find_packages

setup(
    name='certlogic_units',
    version='0.1.0',
    author='certlogic_units contributors',
    description='Time unit recognizer for CertLogic rule evaluation',
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=[
        'PyYAML',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    python_requires='>=3.8',
)
