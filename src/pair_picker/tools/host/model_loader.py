"""
Load a document model snapshot from YAML.

File layout::

    elements:
      - id: W1
        category: Wall
        name: North wall
      - id: D1
        category: Door
    selection: [W1]
"""

from pathlib import Path
from typing import List, Optional, Union

import yaml
from pydantic import BaseModel, Field, ValidationError, model_validator

from ...errors import ModelFileError
from ...schemas.element import Element


class ElementSpec(BaseModel):
    """One element entry in a model file."""

    id: str = Field(min_length=1)
    category: str = Field(min_length=1)
    name: Optional[str] = None

    def to_element(self) -> Element:
        return Element(element_id=self.id, category=self.category, name=self.name)


class DocumentModel(BaseModel):
    """Validated contents of a model file."""

    elements: List[ElementSpec] = Field(default_factory=list)
    selection: List[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_ids(self) -> "DocumentModel":
        seen = set()
        for spec in self.elements:
            if spec.id in seen:
                raise ValueError(f"duplicate element id '{spec.id}'")
            seen.add(spec.id)

        missing = [i for i in self.selection if i not in seen]
        if missing:
            raise ValueError(f"selection references unknown ids {missing}")
        return self

    def to_elements(self) -> List[Element]:
        return [spec.to_element() for spec in self.elements]


def load_document_model(path: Union[str, Path]) -> DocumentModel:
    """
    Read and validate a YAML document model.

    Args:
        path: Path to the YAML file

    Returns:
        Validated DocumentModel

    Raises:
        ModelFileError: If the file is missing, unparsable or invalid
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except OSError as e:
        raise ModelFileError(path, str(e)) from e
    except yaml.YAMLError as e:
        raise ModelFileError(path, f"YAML parse error: {e}") from e

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ModelFileError(path, "top level must be a mapping")

    try:
        return DocumentModel.model_validate(raw)
    except ValidationError as e:
        raise ModelFileError(path, str(e)) from e
