# Copyright 2026 Wiremap Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for the wiremap documentation."""

project = "wiremap"
author = "Wiremap Contributors"
release = "0.1.0"

extensions: list[str] = ["sphinx.ext.autodoc"]

html_theme = "alabaster"
