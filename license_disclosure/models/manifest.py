"""Manifest and package metadata Pydantic models."""

from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import BaseModel, Field, field_validator


class VendorPackage(BaseModel):
    """A single dependency declaration from the Go vendor manifest."""

    model_config = {"extra": "ignore"}

    path: str = Field(description="Import path of the vendored package")
    revision: str = Field(
        default="", description="Pinned revision; empty for local stubs"
    )

    @property
    def is_resolved(self) -> bool:
        """Check if the declaration is pinned to a revision."""
        return self.revision != ""


class VendorManifest(BaseModel):
    """Parsed `vendor/vendor.json` document."""

    model_config = {"extra": "ignore"}

    package: list[VendorPackage] = Field(
        default_factory=list, description="Declared vendored packages, in order"
    )


class PackageAuthor(BaseModel):
    """Structured form of the npm `author` field."""

    model_config = {"extra": "ignore"}

    name: Optional[str] = None
    email: Optional[str] = None
    url: Optional[str] = None


class DeclaredLicense(BaseModel):
    """Structured form of the npm `license` field."""

    model_config = {"extra": "ignore"}

    type: Optional[str] = None
    url: Optional[str] = None


class PackageMetadata(BaseModel):
    """Subset of an npm `package.json` used for disclosure.

    Both `author` and `license` accept either a plain string or an object;
    any other shape (array, number) reads as not declared.
    """

    model_config = {"extra": "ignore"}

    name: str = Field(default="", description="Package name")
    version: str = Field(default="", description="Installed package version")
    license: Union[str, DeclaredLicense, None] = Field(
        default=None, description="Declared license, string or {type, url}"
    )
    licenses: Optional[list[DeclaredLicense]] = Field(
        default=None, description="Legacy list form of the declared license"
    )
    author: Union[str, PackageAuthor, None] = Field(
        default=None, description="Declared author, string or {name, email, url}"
    )

    @field_validator("name", "version", mode="before")
    @classmethod
    def _string_or_empty(cls, v: Any) -> str:
        return v if isinstance(v, str) else ""

    @field_validator("license", mode="before")
    @classmethod
    def _coerce_license(cls, v: Any) -> Union[str, dict[str, Optional[str]], None]:
        if isinstance(v, str):
            return v
        if isinstance(v, dict):
            return _string_fields(v, ("type", "url"))
        return None

    @field_validator("licenses", mode="before")
    @classmethod
    def _coerce_licenses(cls, v: Any) -> Optional[list[dict[str, Optional[str]]]]:
        # Legacy field; a lone object or string is treated as a one-item list
        if isinstance(v, (str, dict)):
            v = [v]
        if not isinstance(v, list):
            return None
        entries: list[dict[str, Optional[str]]] = []
        for item in v:
            if isinstance(item, str):
                entries.append({"type": item, "url": None})
            elif isinstance(item, dict):
                entries.append(_string_fields(item, ("type", "url")))
        return entries or None

    @field_validator("author", mode="before")
    @classmethod
    def _coerce_author(cls, v: Any) -> Union[str, dict[str, Optional[str]], None]:
        if isinstance(v, str):
            return v
        if isinstance(v, dict):
            return _string_fields(v, ("name", "email", "url"))
        return None

    @property
    def declared_license(self) -> str:
        """Declared license string, or empty string when not declared."""
        if isinstance(self.license, str):
            return self.license
        if isinstance(self.license, DeclaredLicense):
            return self.license.type or ""
        if self.licenses:
            return self.licenses[0].type or ""
        return ""

    @property
    def author_display(self) -> str:
        """Author rendered as `name<email>`, or empty string when absent."""
        if isinstance(self.author, str):
            return self.author
        if isinstance(self.author, PackageAuthor):
            display = self.author.name or ""
            if self.author.email:
                display += f"<{self.author.email}>"
            return display
        return ""


def _string_fields(data: dict[str, Any], keys: tuple[str, ...]) -> dict[str, Optional[str]]:
    """Pick the given keys from a JSON object, dropping non-string values."""
    return {key: data[key] if isinstance(data.get(key), str) else None for key in keys}
