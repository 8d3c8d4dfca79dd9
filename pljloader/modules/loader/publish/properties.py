"""Publish the classpath into a Java properties file."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import List

_KEY_RE = re.compile(r"^\s*([^=:\s]+)\s*[=:]")


class ClasspathPublisher:
    """Writes ``key=value`` into a properties file, keeping unrelated lines."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self.log = logging.getLogger(self.__class__.__name__)

    def replace(self, original: str, key: str, value: str) -> str:
        output_lines: List[str] = []
        replaced = False
        for raw_line in original.splitlines():
            line = raw_line.strip()
            if not line or line.startswith(("#", "!")):
                output_lines.append(raw_line)
                continue
            match = _KEY_RE.match(line)
            if match and match.group(1) == key:
                if not replaced:
                    output_lines.append(f"{key}={value}")
                    replaced = True
                continue
            output_lines.append(raw_line)
        if not replaced:
            output_lines.append(f"{key}={value}")
        return "\n".join(output_lines) + "\n"

    def publish(self, key: str, value: str) -> Path:
        original = self.path.read_text(encoding="utf-8") if self.path.exists() else ""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(self.replace(original, key, value), encoding="utf-8")
        self.log.info("Published %s=%s to %s", key, value, self.path)
        return self.path
