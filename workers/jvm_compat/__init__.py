"""
jvm_compat — JVM version compatibility resolution for project generation.

Downgrades the requested JVM version of a project description when the
target platform generation or the chosen language cannot support it.
"""

__version__ = "1.0.0"
RESOLVER_VERSION = "v1"
PACKAGE_NAME = "jvm_compat"
SCHEMA_VERSION = "0.1"
