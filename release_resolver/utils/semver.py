import re

from semantic_version import Version

_VERSION_LIKE = re.compile(r"^v?\d")
_PADDED_COMPONENT = re.compile(r"\.0*(\d)")


# strict semver rejects zero padded components: v8.2.0000 -> v8.2.0
def adjust_semver(tag: str) -> str:
    return _PADDED_COMPONENT.sub(r".\1", tag)


def to_semver(tag: str) -> Version | None:
    """Best-effort conversion of a release tag into a comparable version.

    Symbolic tags such as ``stable`` or ``nightly`` never start with a digit
    and yield ``None``. Missing minor/patch components are filled with zeros
    and anything past the patch component is dropped.
    """
    if not _VERSION_LIKE.match(tag):
        return None
    try:
        version = Version.coerce(adjust_semver(tag).removeprefix("v"))
    except ValueError:
        return None
    return version.truncate()
