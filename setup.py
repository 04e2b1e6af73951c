from setuptools import find_namespace_packages, setup

setup(
    name="indexed-priority-queue",
    version="0.1.0",
    description="Binary min-heap priority queue with an O(log n) decrease-key operation",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["core", "eval", "scenarios", "utilities"]),
    py_modules=["main"],
    install_requires=[
        "numpy>=1.23",
        "matplotlib",
        "click",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["indexed-pq=main:main"],
    },
    python_requires=">=3.8",
    zip_safe=False,
)
