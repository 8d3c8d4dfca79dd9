"""Constants shared across loader domain models."""

DEFAULT_EXTENSION = "jar"
DEFAULT_SCOPE = "compile"

# Scopes making up the runtime class path of a project.
RUNTIME_SCOPES = frozenset({"compile", "runtime"})

CLASSPATH_SEPARATOR = ":"

ORIGIN_PROJECT = "project"
ORIGIN_DESCRIPTOR = "descriptor"
ORIGIN_LOCAL_REPOSITORY = "local-repository"
ORIGIN_REMOTE_PREFIX = "remote:"
