# Copyright 2026 tfschemagen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Generator configuration."""

from tfschemagen.config.config import GenerateOptions, GeneratorConfig, GeneratorConfigError, load_generator_config

__all__ = ["GenerateOptions", "GeneratorConfig", "GeneratorConfigError", "load_generator_config"]
