# src/core/models.py — v1
"""Core domain models: DocumentDescriptor and category/role literals."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, TypeAdapter

DocCategory = Literal["typespec", "json-manifest", "other"]
TargetCategory = Literal["typespec", "json-manifest"]
DocRole = Literal["capabilities", "authentication", "decorators", "scenarios", "overview"]

TARGET_CATEGORIES: tuple[str, ...] = ("typespec", "json-manifest")
DOC_ROLES: tuple[str, ...] = (
    "capabilities", "authentication", "decorators", "scenarios", "overview",
)


class DocumentDescriptor(BaseModel):
    """One indexed document: identity, label, source and category."""

    filename: str
    title: str
    url: str
    category: DocCategory


class RemoteEntry(BaseModel):
    """One item of the remote directory listing."""

    name: str
    type: str = "file"
    download_url: str | None = None


DescriptorList = TypeAdapter(list[DocumentDescriptor])
RemoteListing = TypeAdapter(list[RemoteEntry])
