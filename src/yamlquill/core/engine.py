#!/usr/bin/env python3
"""
YAMLQUILL ENGINE - The Orchestrator
-----------------------------------
The RenderEngine takes a data document (and optionally a comment tree)
from disk, runs it through the Dumper and reports what happened. Output
files are written atomically; the Dumper itself never touches the disk.

Author: YamlQuill Team
Date: 2026-10-18
"""

import os
import json
import time
import logging
from pathlib import Path
from typing import Dict, Any, List, Optional

from ruamel.yaml import YAML, YAMLError

from yamlquill.core.errors import UnsupportedTypeError
from yamlquill.emitting.dumper import Dumper

logger = logging.getLogger("yamlquill.engine")

YAML_SUFFIXES = (".yaml", ".yml")
JSON_SUFFIXES = (".json",)

class RenderEngine:
    """
    Principal Orchestrator for file-based rendering.
    Resolves paths against a workspace and turns every failure into a
    report status instead of an exception.
    """

    def __init__(self, workspace_path: str, indentation: int = 4):
        self.workspace = Path(workspace_path).resolve()
        self.dumper = Dumper(indentation)
        self.loader = YAML(typ="safe", pure=True)
        self._ensure_workspace()

    def _ensure_workspace(self):
        """Validates/Creates target workspace to prevent OS path errors."""
        if not self.workspace.exists():
            logger.info(f"Creating missing workspace: {self.workspace}")
            self.workspace.mkdir(parents=True, exist_ok=True)

    def load_document(self, path: Path) -> Any:
        """
        Reads a JSON or YAML document. Key order is preserved by both loaders.
        """
        path = Path(path)
        suffix = path.suffix.lower()
        text = path.read_text(encoding="utf-8-sig")

        if suffix in JSON_SUFFIXES:
            return json.loads(text)
        if suffix in YAML_SUFFIXES:
            return self.loader.load(text)
        raise ValueError(f"Unsupported document type '{suffix}' for {path.name}")

    def render_file(self, relative_path: str, comments_path: Optional[str] = None,
                    inline: int = 2, strict: bool = False, objects: bool = False,
                    output_path: Optional[str] = None, dry_run: bool = True) -> Dict[str, Any]:
        """
        Loads, renders and (unless dry_run) writes a single document.
        """
        full_path = (self.workspace / relative_path).resolve()
        if not full_path.exists():
            return self._file_error(relative_path, "FILE_NOT_FOUND", f"Path missing: {full_path}")

        comments_full = None
        if comments_path:
            comments_full = (self.workspace / comments_path).resolve()
            if not comments_full.exists():
                return self._file_error(relative_path, "FILE_NOT_FOUND", f"Path missing: {comments_full}")

        # Phase 1: Load
        try:
            data = self.load_document(full_path)
            comments = self.load_document(comments_full) if comments_full else {}
        except (OSError, ValueError, YAMLError) as e:
            # json.JSONDecodeError is a ValueError
            logger.error(f"Unable to load {relative_path}: {str(e)}")
            return self._file_error(relative_path, "LOAD_ERROR", str(e))

        # Phase 2: Render
        try:
            content = self.dumper.render_commented(
                data, comments, inline=inline,
                strict_types=strict, allow_opaque_types=objects
            )
        except UnsupportedTypeError as e:
            logger.error(f"Cannot render {relative_path}: {str(e)}")
            return self._file_error(relative_path, "UNSUPPORTED_TYPE", str(e))

        # A top-level inline render carries no line break of its own
        if not content.endswith("\n"):
            content += "\n"

        result = {
            "file_path": str(relative_path),
            "status": "PREVIEW" if output_path and dry_run else "RENDERED",
            "success": True,
            "content": content,
            "lines": content.count("\n"),
            "written": False,
            "output_path": None,
            "error": None,
            "timestamp": time.time()
        }

        # Phase 3: Persist
        if output_path and not dry_run:
            target = (self.workspace / output_path).resolve()
            try:
                self._atomic_write(target, content)
            except (IOError, PermissionError) as e:
                logger.error(f"Write failed for {target}: {str(e)}")
                result.update(status="WRITE_ERROR", success=False, error=str(e))
                return result
            result.update(status="WRITTEN", written=True, output_path=str(target))

        return result

    def generate_summary(self, reports: List[Dict[str, Any]]) -> Dict[str, Any]:
        """Aggregates a batch of render reports."""
        total = len(reports)
        successful = sum(1 for r in reports if r.get("success", False))
        return {
            "total_files": total,
            "successful": successful,
            "failed": total - successful,
            "written_to_disk": sum(1 for r in reports if r.get("written", False)),
            "success_rate": (successful / total) if total > 0 else 0,
            "summary_timestamp": time.strftime("%Y-%m-%d %H:%M:%S")
        }

    def _atomic_write(self, target_path: Path, content: str):
        target_path.parent.mkdir(parents=True, exist_ok=True)
        if not os.access(target_path.parent, os.W_OK):
            raise PermissionError(f"No write access to {target_path.parent}")
        temp_file = target_path.with_suffix(target_path.suffix + ".yamlquill.tmp")
        try:
            temp_file.write_text(content, encoding="utf-8")
            os.replace(temp_file, target_path)
        except OSError as e:
            if temp_file.exists():
                temp_file.unlink()
            raise IOError(f"Atomic write failed: {str(e)}")

    def _file_error(self, path: str, status: str, error: str) -> Dict[str, Any]:
        return {
            "file_path": str(path), "status": status, "error": error,
            "success": False, "written": False, "content": None,
            "timestamp": time.time()
        }
