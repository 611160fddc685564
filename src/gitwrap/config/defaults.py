"""Starter .gitwrap.toml template."""

DEFAULT_TOML = """\
# gitwrap configuration
version = "1.0"

[git]
binary = "git"
timeout = 30              # seconds per git invocation
comment_prefix = true     # request "# "-prefixed status output from current git

[output]
format = "terminal"       # terminal | json | yaml
show_diagnostics = true

[client]
backend = "cli"
"""
