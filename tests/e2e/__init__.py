# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
End-to-end tests for locadoc.

Complete workflows from backend-shaped record payloads to saved and printed
documents.
"""
