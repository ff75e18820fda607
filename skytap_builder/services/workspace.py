import os
import re

from skytap_builder.schemas.build import BuildContext

_VAR_RE = re.compile(r"\$\{(\w+)\}|\$(\w+)")


def expand_env_vars(build: BuildContext, raw: str) -> str:
    """Replace $VAR and ${VAR} with values from the build env; unknown names are kept."""
    if not raw:
        return ""

    def _sub(m: re.Match) -> str:
        name = m.group(1) or m.group(2)
        return build.env.get(name, m.group(0))

    return _VAR_RE.sub(_sub, raw)


def to_absolute_path(build: BuildContext, path: str) -> str:
    # a bare file name lands in the build workspace
    if not path:
        return ""
    if os.path.isabs(path):
        return path
    return os.path.abspath(os.path.join(build.workspace, path))
