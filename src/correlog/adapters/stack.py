"""Stack cleaner adapter that filters frames by path."""

from collections.abc import Sequence

_DEFAULT_SILENCERS = ("site-packages", "dist-packages", "<frozen ")


class PathStackCleaner:
    """StackCleaner implementation filtering on frame text.

    Drops frames from installed libraries and the interpreter, keeping the
    application's own frames. Kept frames have the root prefix stripped.

    Example:
        ```python
        cleaner = PathStackCleaner(root="/srv/app/")
        cleaner.clean([
            "/srv/app/orders.py:12:in place",
            "/usr/lib/python3/site-packages/x.py:1:in f",
        ])
        # ["orders.py:12:in place"]
        ```
    """

    def __init__(
        self,
        root: str | None = None,
        silencers: Sequence[str] | None = None,
    ) -> None:
        """Initialize the cleaner.

        Args:
            root: Path prefix stripped from kept frames (optional).
            silencers: Substrings marking frames to drop. Defaults to
                installed packages and frozen interpreter modules.
        """
        self._root = root
        self._silencers = tuple(_DEFAULT_SILENCERS if silencers is None else silencers)

    def clean(self, frames: Sequence[str]) -> list[str]:
        """Return the frames not matching any silencer, root stripped."""
        kept = [f for f in frames if not any(s in f for s in self._silencers)]
        if not self._root:
            return kept
        return [f.removeprefix(self._root) for f in kept]
