from setuptools import setup, find_packages

setup(
    name = "libchacha",
    version = "0.1.0",
    packages = ["libchacha"],
    py_modules = ["chachautil"],
    description = "A pure Python implementation of the ChaCha20 stream cipher",
    license = "GPL",
    keywords = "chacha20 stream cipher",
    python_requires=">=3.6",
    install_requires=["pycryptodome>=3.9"],
    extras_require={"test": ["pytest"]},
    test_suite="tests"
)
