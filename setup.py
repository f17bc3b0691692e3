from setuptools import setup, find_packages

setup(
    name="course_skill_analyzer",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
        "python-dotenv>=0.19.0",
        "fastapi>=0.100.0",
        "uvicorn>=0.22.0",
        "python-multipart>=0.0.6",
        "httpx>=0.24.0",
        "tenacity>=8.0.0",
        "click>=8.0.0",
        "tqdm>=4.60.0",
        "psutil>=5.8.0",
        "pdfplumber>=0.9.0",
        "PyPDF2>=2.0.0",
        "mammoth>=1.6.0",
        "python-docx>=0.8.11",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    python_requires=">=3.8",
)
