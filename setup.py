"""
pip-installable setup for the msnet-classifier SDK and its core engine.

Install (editable, from the repository root)::

    pip install -e .

This installs both packages:
  - msnet_classifier   — the clean public SDK
  - msnet_router       — the underlying MoE dispatcher (also usable directly)

The FastAPI web app (app/) is NOT included — it is a separate runtime concern.
"""

from setuptools import find_packages, setup

_SERVER_REQUIRES = [
    "fastapi>=0.109.0",
    "uvicorn[standard]>=0.27.0",
    "pydantic>=2.0.0",
    "pydantic-settings>=2.0.0",
]

setup(
    name="msnet-classifier",
    version="1.0.0",
    description="Router-guided Mixture-of-Experts image classification",
    long_description=(
        "A Python SDK around a mixture-of-experts inference dispatcher: "
        "Router Inference → Top-K → Expert Selection → Expert Inference → Logit Fusion. "
        "Experts are specialised classifiers named after the classes they refine."
    ),
    python_requires=">=3.10",
    packages=find_packages(
        include=[
            "msnet_classifier",
            "msnet_classifier.*",
            "msnet_router",
            "msnet_router.*",
        ]
    ),
    install_requires=[
        "torch>=2.0.0",
        "numpy>=1.24.0",
    ],
    extras_require={
        # Install the web service dependencies as well
        "server": _SERVER_REQUIRES,
        "test": _SERVER_REQUIRES + [
            "pytest>=7.0.0",
            "httpx>=0.24.0",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Scientific/Engineering :: Artificial Intelligence",
        "Topic :: Scientific/Engineering :: Image Recognition",
    ],
)
