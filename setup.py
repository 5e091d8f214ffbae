from setuptools import setup, find_packages

setup(
    name="robotstate-sdk",
    version="0.1.0",
    description="Robot configuration and pose data model (minimal)",
    package_dir={"": "src"},
    packages=find_packages("src"),
    include_package_data=True,
    package_data={"robotstate_sdk": ["resources/configs/*.yaml"]},
    install_requires=["numpy>=1.21", "pyyaml>=6.0", "scipy>=1.7"],
    extras_require={
        "dev": ["pytest", "black", "ruff"],
    },
)
