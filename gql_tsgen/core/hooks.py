"""Hooks that run around TypeScript generation.

A pre-generate hook sees the classified ExtendedTypeMap and returns the map
that gets rendered. A post-generate hook sees each finished `.ts` file and
returns its final text. Hooks are plain objects; anything with the right
method satisfies the protocol:

    class DropDeprecated:
        def pre_generate(self, types):
            types.enums.pop("LegacyStatus", None)
            return types

    runner = HookRunner([DropDeprecated(), HeaderCommentHook("eslint-disable")])
    generate_all(document, hooks=runner)
"""

from collections.abc import Iterable
from dataclasses import replace
from typing import Protocol, runtime_checkable

from .ir import ExtendedTypeMap, UnionTypeInfo

COMMENT_STARTS = ("//", "/*")


@runtime_checkable
class PreGenerateHook(Protocol):
    """Rewrites the classified definitions before any file is rendered."""

    def pre_generate(self, types: ExtendedTypeMap) -> ExtendedTypeMap:
        ...


@runtime_checkable
class PostGenerateHook(Protocol):
    """Rewrites one rendered file, e.g. `types.ts`, before it is returned."""

    def post_generate(self, filename: str, content: str) -> str:
        ...


class HeaderCommentHook:
    """Put a comment block above the generated banner.

    Text that is already a TypeScript comment is kept as written; anything
    else becomes one `//` line per input line.
    """

    def __init__(self, text: str):
        text = text.rstrip("\n")
        if text.lstrip().startswith(COMMENT_STARTS):
            self.comment = text
        else:
            self.comment = "\n".join(f"// {line}".rstrip() for line in text.splitlines())

    def post_generate(self, filename: str, content: str) -> str:
        return f"{self.comment}\n\n{content}"


class ExcludeTypesHook:
    """Drop definitions by exact name or name prefix.

    Every bucket is filtered, and union members naming a dropped type are
    removed so unions never point at a declaration that was not emitted.
    Root operation signatures are left alone.
    """

    def __init__(self, prefixes: Iterable[str] = (), names: Iterable[str] = ()):
        self.prefixes = tuple(p for p in prefixes if p)
        self.names = frozenset(names)

    def excludes(self, name: str) -> bool:
        return name in self.names or name.startswith(self.prefixes)

    def pre_generate(self, types: ExtendedTypeMap) -> ExtendedTypeMap:
        if not (self.prefixes or self.names):
            return types
        buckets = {
            bucket_name: {name: info for name, info in bucket.items() if not self.excludes(name)}
            for bucket_name, bucket in types.buckets().items()
        }
        buckets["unions"] = {name: self._prune(info) for name, info in buckets["unions"].items()}
        return ExtendedTypeMap(**buckets)

    def _prune(self, info: UnionTypeInfo) -> UnionTypeInfo:
        return replace(info, types=[t for t in info.types if not self.excludes(t)])


class HookRunner:
    """Chains hooks in registration order.

    The runner is itself both a pre- and a post-generate hook, so it can
    be passed wherever a single hook is expected.
    """

    def __init__(self, hooks: Iterable[PreGenerateHook | PostGenerateHook] = ()):
        self.pre_hooks: list[PreGenerateHook] = []
        self.post_hooks: list[PostGenerateHook] = []
        for hook in hooks:
            self.add(hook)

    def add(self, hook: PreGenerateHook | PostGenerateHook) -> None:
        """Register a hook under every protocol it implements."""
        is_pre = isinstance(hook, PreGenerateHook)
        is_post = isinstance(hook, PostGenerateHook)
        if not (is_pre or is_post):
            raise TypeError(f"{type(hook).__name__} has neither pre_generate nor post_generate")
        if is_pre:
            self.pre_hooks.append(hook)
        if is_post:
            self.post_hooks.append(hook)

    def pre_generate(self, types: ExtendedTypeMap) -> ExtendedTypeMap:
        for hook in self.pre_hooks:
            types = hook.pre_generate(types)
        return types

    def post_generate(self, filename: str, content: str) -> str:
        for hook in self.post_hooks:
            content = hook.post_generate(filename, content)
        return content
