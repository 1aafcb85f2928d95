from setuptools import setup, find_packages

setup(
   name="affordances",
   version="0.1.0",
   package_dir={"": "src"},
   packages=find_packages(where="src"),
   include_package_data=True,
   python_requires=">=3.10",
   install_requires=[
      "pydantic>=2.0",
      "fastapi>=0.100",
   ],
   extras_require={
      "test": ["pytest"],
   },
)
