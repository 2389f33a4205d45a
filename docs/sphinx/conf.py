# Copyright 2026 Oxy Python Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for Oxy Python documentation."""

project = "Oxy Python"
author = "Oxy Python Contributors"
release = "0.1.0"

extensions: list[str] = ["sphinx.ext.autodoc"]

autodoc_member_order = "bysource"

html_theme = "alabaster"
