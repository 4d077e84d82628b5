# Copyright 2026 tfschemagen Contributors
# SPDX-License-Identifier: Apache-2.0
