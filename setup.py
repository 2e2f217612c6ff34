from setuptools import setup, find_packages

setup(
    name="pdf_engine",
    version="1.0.0",
    description="PDF document editing engine: page structure, annotations, redaction, watermarks and undo/redo history",
    author="PDF Editor Team",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "PyMuPDF>=1.25.0",
        "Pillow>=10.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "pdf-engine=pdf_engine.main:main",
        ],
    },
    python_requires=">=3.8",
)
