from setuptools import setup, find_packages

DEV_DEPENDENCIES = [
    "pytest>=6",
    "pytest-xdist[psutil]>=2",
    "pytest-cov>=2.10.1",
    "coverage>=5",
    "pre-commit>=2.7",
    "black>=22.3.0",
    "flake8>=4.0.1",
]
BASE_DEPENDENCIES = [
    "numpy>=1.22",
    "tqdm>=4.60",
    "plum-dispatch>=2.2",
]

setup(
    name="sampleflow",
    version="0.1.0",
    author="The SampleFlow Authors",
    license="Apache 2.0",
    description="SampleFlow : streaming statistics of stochastic process samples.",
    long_description="""SampleFlow connects producers of samples, such as Markov
         chain Monte Carlo samplers, to filters and consumers that compute
         running statistics (acceptance ratio, autocovariance, ...) without
         storing the history of the samples.""",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: MacOS :: MacOS X",
        "Operating System :: POSIX :: Linux",
        "Operating System :: Unix",
        "Topic :: Scientific/Engineering :: Mathematics",
    ],
    packages=find_packages(include=["sampleflow*"]),
    install_requires=BASE_DEPENDENCIES,
    python_requires=">=3.10",
    extras_require={
        "dev": DEV_DEPENDENCIES,
        "test": DEV_DEPENDENCIES,
        "all": DEV_DEPENDENCIES,
    },
)
