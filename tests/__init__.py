# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
locadoc test suite.

Unit tests per module plus end-to-end tests that drive the complete
records-to-file flow.
"""
