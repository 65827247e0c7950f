"""Loading GLSL shader source text from disk."""

from __future__ import annotations

import os
from typing import Union

__all__ = ["ShaderSourceError", "read_shader_source", "read_shader_pair"]

PathLike = Union[str, os.PathLike]


class ShaderSourceError(OSError):
    """Raised when a shader source file cannot be opened."""


def read_shader_source(path: PathLike) -> str:
    """Read a shader file, prefixing every line with a newline."""
    try:
        with open(path, "r", encoding="utf-8", newline="") as handle:
            content = handle.read()
    except OSError as exc:
        raise ShaderSourceError(f"impossible to open {os.fspath(path)}: {exc}") from exc
    if not content:
        return ""
    lines = content.split("\n")
    if content.endswith("\n"):
        lines.pop()
    return "".join("\n" + line for line in lines)


def read_shader_pair(vertex_path: PathLike, fragment_path: PathLike) -> tuple[str, str]:
    """Read vertex and fragment sources.

    A missing vertex shader is an error; a missing fragment shader yields
    empty source.
    """
    vertex = read_shader_source(vertex_path)
    try:
        fragment = read_shader_source(fragment_path)
    except ShaderSourceError:
        fragment = ""
    return vertex, fragment