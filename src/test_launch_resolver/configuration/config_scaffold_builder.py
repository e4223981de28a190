"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "launch-resolver.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Settings template for test-launch-resolver.
# Replace every <REQUIRED> placeholder before running resolve.
# Remove <OPTIONAL> entries to fall back to the documented defaults.

runner:
  # Directory holding the bundled TestNG runner archive and its library folder.
  home: "<REQUIRED>"
  # archive: "com.microsoft.java.test.runner-jar-with-dependencies.jar"  <OPTIONAL>
  # library: "lib"  <OPTIONAL>
  # entry_class: "com.microsoft.java.test.runner.Launcher"  <OPTIONAL>
  # Port the runner reports results to (0 lets the runner pick).
  # port: 0  <OPTIONAL>

arguments:
  # YAML/JSON document with resolved launch arguments per project.
  # Relative paths resolve against this file's directory.
  path: "<REQUIRED>"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML settings template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder settings template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
