"""Artifact Assembler: única porta de entrada exposta ao motor de regras."""

from .assembler import BuildResult, BuildStatus, assemble_artifact, build_artifact  # noqa: F401

__all__ = ["BuildResult", "BuildStatus", "assemble_artifact", "build_artifact"]
