# topmark:header:start
#
#   project      : YamlCraft
#   file         : __init__.py
#   file_relpath : src/yamlcraft/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration and logging for YamlCraft.

Build configs using `MutableRenderConfig` (mutable), then `freeze()` into a
`RenderConfig` for rendering. Do not mutate a frozen `RenderConfig`; call
`RenderConfig.thaw()`, edit the builder, then `freeze()` again.
"""

from __future__ import annotations

from yamlcraft.config.model import MutableRenderConfig, RenderConfig

__all__ = [
    "MutableRenderConfig",
    "RenderConfig",
]
