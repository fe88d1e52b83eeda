# python/pbrtscene/errors.py
# Structured error taxonomy raised while turning directive parameters into scene entities
# Exists to let the scene assembler locate a bad directive by family, tag and field
# RELEVANT FILES:python/pbrtscene/params.py,python/pbrtscene/scene.py,tests/test_errors.py

from __future__ import annotations

from typing import Optional


class SceneParseError(ValueError):
    """Base class for every error produced by the entity constructors.

    ``family`` is the entity family ("film", "shape", ...), ``tag`` the type tag
    of the directive and ``field`` the parameter that failed, when known.
    """

    def __init__(
        self,
        message: str,
        *,
        family: Optional[str] = None,
        tag: Optional[str] = None,
        field: Optional[str] = None,
    ) -> None:
        self.family = family
        self.tag = tag
        self.field = field
        self.detail = message
        super().__init__(self._format(message))

    def _format(self, message: str) -> str:
        where = []
        if self.family is not None:
            where.append(self.family)
        if self.tag is not None:
            where.append(repr(self.tag))
        if self.field is not None:
            where.append(f"field {self.field!r}")
        if not where:
            return message
        return f"{' '.join(where)}: {message}"


class UnrecognizedTokenError(SceneParseError):
    """A token does not belong to a closed enumeration."""

    def __init__(self, enumeration: str, token: str, *, field: Optional[str] = None) -> None:
        self.enumeration = enumeration
        self.token = token
        super().__init__(f"Unknown {enumeration}: {token!r}", field=field)


class UnrecognizedTypeError(SceneParseError):
    """A type tag is outside the declared set of its entity family."""

    def __init__(self, family: str, tag: str) -> None:
        super().__init__(f"Unknown {family} type", family=family, tag=tag)


class ArityMismatchError(SceneParseError):
    """A present fixed-arity array parameter has the wrong length."""

    def __init__(self, family: str, tag: Optional[str], field: str, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"expected {expected} values, got {actual}",
            family=family,
            tag=tag,
            field=field,
        )


class IndexCountError(ArityMismatchError):
    """A mesh index array whose length is not a multiple of the primitive size."""

    def __init__(self, family: str, tag: Optional[str], field: str, multiple: int, actual: int) -> None:
        self.multiple = multiple
        self.expected = multiple
        self.actual = actual
        SceneParseError.__init__(
            self,
            f"length must be a multiple of {multiple}, got {actual}",
            family=family,
            tag=tag,
            field=field,
        )


class UnimplementedVariantError(SceneParseError):
    """A declared tag or option whose constructor has not been built yet."""

    def __init__(self, family: str, tag: str) -> None:
        super().__init__(f"{family} type is not yet supported", family=family, tag=tag)


class UnknownTextureError(SceneParseError):
    """A material parameter references a texture that was never declared."""

    def __init__(self, family: str, tag: Optional[str], field: str, texture: str) -> None:
        self.texture = texture
        super().__init__(
            f"references undeclared texture {texture!r}",
            family=family,
            tag=tag,
            field=field,
        )


class ParameterDeclarationError(SceneParseError):
    """A parameter list entry is malformed (bad declaration, kind or value)."""


class DirectiveError(SceneParseError):
    """Wraps a constructor error with the position of the offending directive."""

    def __init__(self, index: int, cause: SceneParseError) -> None:
        self.index = index
        self.cause = cause
        self.family = cause.family
        self.tag = cause.tag
        self.field = cause.field
        self.detail = cause.detail
        ValueError.__init__(self, f"directive #{index}: {cause}")
