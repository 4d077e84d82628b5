# Copyright 2026 tfschemagen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for tfschemagen documentation."""

project = "tfschemagen"
author = "tfschemagen Contributors"
release = "0.1.0"

extensions: list[str] = []

html_theme = "alabaster"
