from setuptools import setup, find_packages
import pathlib


here = pathlib.Path(__file__).parent.resolve()
long_description = (here / 'README.md').read_text(encoding='utf-8')

setup(
    name="ipa-transcribers",
    version="0.0.2",
    description="Rule-based transcription of native orthography into broad IPA",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Topic :: Text Processing :: Linguistic",
    ],
    packages=find_packages(include=["ipa_transcribers", "ipa_transcribers.*"]),
    python_requires=">=3.7",
    install_requires=['schema', 'click', 'pandas', 'pandera>=0.24', 'autopep8'],
    extras_require={
        'dev': ['pytest', 'pytest-cov'],
    },
)
