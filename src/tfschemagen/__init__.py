# Copyright 2026 tfschemagen Contributors
# SPDX-License-Identifier: Apache-2.0

"""tfschemagen: Terraform Plugin Framework schema code generator."""

__version__ = "0.1.0"
