"""Helper utilities for constructing temporary component trees in tests."""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Mapping


class ComponentTreeBuilder:
    """Utility for writing component sources into a throwaway directory."""

    def __init__(self, tmp_path: Path) -> None:
        self.root = tmp_path / "components"
        self.root.mkdir()

    def write(self, files: Mapping[str, str]) -> None:
        """Write `path -> contents` entries under the components root."""
        for relative, content in files.items():
            path = self.root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            normalised = textwrap.dedent(content).lstrip("\n")
            path.write_text(normalised, encoding="utf-8")

    def path(self, relative: str | None = None) -> Path:
        """Return the root path, or the path of a file beneath it."""
        return self.root / relative if relative else self.root


TAG_SOURCE = """
import React from 'react'
import styled from 'styled-components'
import tokens from '@/styles/tokens.json'

export interface TagProps {
  /**
   * Text content to display in the tag
   */
  children: React.ReactNode

  /**
   * Visual variant of the tag based on semantic meaning
   * @default 'default'
   */
  variant?: 'default' | 'interactive' | 'success'

  /**
   * Whether to show a border
   */
  border?: boolean

  /** Test identifier for automated testing */
  'data-testid'?: string

  _internal?: number
}

const StyledTag = styled.span``

export const Tag: React.FC<TagProps> = ({
  children,
  variant = 'default',
  border = true,
  'data-testid': dataTestId = 'tag',
  ...props
}) => {
  return <StyledTag data-testid={dataTestId}>{children}</StyledTag>
}
"""


__all__ = ["ComponentTreeBuilder", "TAG_SOURCE"]
