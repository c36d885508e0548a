"""Default configuration values and starter .commitcheck.toml template."""

DEFAULT_TOML = r"""# commitcheck configuration
extends = ["conventional"]      # later entries override earlier ones

[ignores]
defaults = true                 # merge / revert / fixup! / squash! messages

[[ignores.matchers]]
kind = "prefix"                 # prefix | exact | regex
value = "Merge "

[parser]
header_pattern = '^([a-zA-Z]+)(\([^)]+\))?:\s*(.*)$'
header_correspondence = ["type", "scope", "subject"]

[rules]
# [severity] | [severity, when] | [severity, when, value]
# severity: 0 | 1 | 2  or  "off" | "warning" | "error"
"subject-empty" = [0]

[output]
format = "terminal"             # terminal | json | text
show_summary = true
"""
