import os
import subprocess


# Version of the source distribution, used outside of a git checkout
version = "0.1.0"


def describe():
    """Return the version derived from the latest git tag, if any.

    A tagged commit gives the tag itself, later commits give
    `<tag>-r<revision>-<commit>`.
    """
    try:
        description = subprocess.check_output(
            "git describe --tags".split(),
            stderr=subprocess.STDOUT,
            cwd=os.path.dirname(os.path.abspath(__file__)),
            universal_newlines=True)
    except (OSError, subprocess.CalledProcessError):
        return None

    parts = description.rstrip().lstrip('v').split("-")
    if len(parts) == 1:  # tagged release
        return parts[0]
    elif len(parts) == 3:  # tag + a few commits
        tag, revision, commit = parts
        return "{}-r{}-{}".format(tag, revision, commit)
    else:
        raise RuntimeError("Invalid version format")


version = describe() or version
