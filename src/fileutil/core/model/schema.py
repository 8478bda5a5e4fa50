import os
from pydantic import BaseModel, ConfigDict, field_validator
from typing import Any, Dict, Literal, Optional, Union


class FileDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True)

    mimetype: Union[str, Literal[False]]
    name: str
    path: str
    dir: str
    extension: str

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()


class FileWrite(BaseModel):
    """One entry of write_files(): {path, data} or {path, filename, data}."""
    path: str
    data: Union[str, bytes]
    filename: Optional[str] = None
    encoding: Optional[str] = None

    @field_validator("path", mode="before")
    @classmethod
    def _path_to_str(cls, v: Any) -> Any:
        return os.fspath(v) if isinstance(v, os.PathLike) else v

    @field_validator("path")
    @classmethod
    def _path_not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("path must not be empty")
        return v
