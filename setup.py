from setuptools import setup

with open('readme.rst', encoding='utf-8') as f:
    long_description = f.read()

setup(
    name="mldsa-kat",
    version="1.0.0",
    author="The mldsa-kat authors",
    description="Convert ML-DSA known-answer tests into JSON test vectors",
    long_description=long_description,
    license="BSD-2-Clause",
    long_description_content_type="text/x-rst",
    packages=['mldsa_kat'],
    python_requires=">=3.9",
    install_requires=[
        "dilithium-py~=1.5",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "mldsa-kat = mldsa_kat.converter:main",
        ],
    },
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
    ],
)
