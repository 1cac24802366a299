"""
interview_insights.reporting — Payload reading, terminal formatting, export.

This package sits at the edges of the engine: it reads payload files from
disk before assembly and formats or writes the assembled tree afterwards.

Modules:
  reader     — Payload discovery, JSON loading, boundary validation.
  formatters — Plain-text terminal formatters for Typer CLI commands.
  export     — CSV/JSON flat-file export helpers.
"""
