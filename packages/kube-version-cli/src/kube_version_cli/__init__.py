# SPDX-License-Identifier: MIT
"""Command line interface for Kubernetes API version parsing."""

__version__ = "0.1.0"
