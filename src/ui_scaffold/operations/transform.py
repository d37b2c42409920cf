"""Rewrite registry import specifiers to the consumer's aliases.

Registry sources import each other through fixed specifiers such as
"@/components/ui/button" or "@/lib/utils". Only the specifier inside the
quotes is touched; everything else in the file is left byte-for-byte.
"""

import re

from ui_scaffold.exceptions import ImportRewriteError
from ui_scaffold.models.config import Aliases

# from "x" | import "x" | import("x") | require("x")
_SPECIFIER_RE = re.compile(
    r"""(?P<lead>\bfrom\s*|\bimport\s*\(?\s*|\brequire\s*\(\s*)"""
    r"""(?P<quote>["'])(?P<spec>[^"'\n]*)(?P=quote)"""
)

_UNTERMINATED_RE = re.compile(
    r"""(?:\bfrom|\bimport\s*\(?|\brequire\s*\()\s*(?P<quote>["'])(?:(?!(?P=quote)).)*$""",
    re.MULTILINE,
)

_REGISTRY_UI_RE = re.compile(r"^@/registry/[\w-]+/ui(?=/|$)")


def alias_rules(aliases: Aliases) -> list[tuple[str, str]]:
    """Prefix replacements, most specific first."""
    return [
        ("@/components/ui", aliases.ui),
        ("@/lib/utils", aliases.utils),
        ("@/components", aliases.components),
        ("@/hooks", aliases.hooks),
        ("@/lib", aliases.lib),
    ]


def rewrite_specifier(spec: str, aliases: Aliases) -> str:
    """Map one import specifier onto the configured aliases.

    Prefixes only match whole path segments: "@/library" is not "@/lib".
    """
    spec = _REGISTRY_UI_RE.sub("@/components/ui", spec)
    for prefix, replacement in alias_rules(aliases):
        if spec == prefix:
            return replacement
        if spec.startswith(prefix + "/"):
            return replacement + spec[len(prefix) :]
    return spec


def transform_imports(source: str, aliases: Aliases, file_id: str = "<source>") -> str:
    """Return `source` with every aliased import specifier rewritten.

    Raises:
        ImportRewriteError: If an import specifier is not terminated on its
            line, which means the file cannot be rewritten safely
    """
    unterminated = _UNTERMINATED_RE.search(source)
    if unterminated is not None:
        line = source.count("\n", 0, unterminated.start()) + 1
        raise ImportRewriteError(file_id, f"unterminated import specifier on line {line}")

    def _replace(match: re.Match[str]) -> str:
        spec = match.group("spec")
        rewritten = rewrite_specifier(spec, aliases)
        if rewritten == spec:
            return match.group(0)
        quote = match.group("quote")
        return f"{match.group('lead')}{quote}{rewritten}{quote}"

    return _SPECIFIER_RE.sub(_replace, source)
