"""
Translator Configuration.

Holds the settings that stay fixed for a whole translation call: the output
capability tier and the well-known names the localized-string lowering
emits. Values can come from a `[tool.ir_lowering]` table in the nearest
`pyproject.toml`, overridden by explicit arguments.
"""

import sys
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

from pydantic import BaseModel, Field, field_validator

from ir_lowering.enums import ScriptTarget
from ir_lowering.utils.console import log_warning

if sys.version_info >= (3, 11):
  import tomllib
else:
  import tomli as tomllib


class TranslatorConfig(BaseModel):
  """
  Settings for one translation call.
  """

  target: ScriptTarget = Field(ScriptTarget.ES2015, description="Capability tier of the output runtime.")
  runtime_helper_module: str = Field("tslib", description="Module providing downlevel runtime helpers.")
  template_object_helper: str = Field(
    "__makeTemplateObject", description="Helper building a tagged-template object below ES2015."
  )
  localize_tag: str = Field("$localize", description="Global identifier tagging localized messages.")
  import_prefix: str = Field("i", description="Prefix of generated module aliases (i0, i1, ...).")

  @field_validator("target", mode="before")
  @classmethod
  def validate_target(cls, v: Any) -> ScriptTarget:
    """
    Accepts a `ScriptTarget`, its integer value, or its name.

    Args:
        v: The raw value.

    Returns:
        ScriptTarget: The resolved target.

    Raises:
        ValueError: If the value names no target.
    """
    if isinstance(v, ScriptTarget):
      return v
    if isinstance(v, str):
      return ScriptTarget.parse(v)
    return ScriptTarget(v)

  @classmethod
  def from_target(cls, target: Union["TranslatorConfig", ScriptTarget, str]) -> "TranslatorConfig":
    """Wraps a bare target in a default config; passes configs through."""
    if isinstance(target, TranslatorConfig):
      return target
    return cls(target=target)

  @classmethod
  def load(
    cls,
    target: Optional[Union[ScriptTarget, str]] = None,
    runtime_helper_module: Optional[str] = None,
    localize_tag: Optional[str] = None,
    import_prefix: Optional[str] = None,
    search_path: Optional[Path] = None,
  ) -> "TranslatorConfig":
    """
    Loads configuration from pyproject.toml and overrides with arguments.

    Args:
        target: Override for the capability tier.
        runtime_helper_module: Override for the helper module.
        localize_tag: Override for the localize tag.
        import_prefix: Override for the alias prefix.
        search_path: Directory to start searching for TOML config.

    Returns:
        TranslatorConfig: The fully resolved configuration object.
    """
    start_dir = search_path or Path.cwd()
    toml_config, _ = _load_toml_settings(start_dir)

    overrides = {
      "target": target,
      "runtime_helper_module": runtime_helper_module,
      "localize_tag": localize_tag,
      "import_prefix": import_prefix,
    }
    merged: Dict[str, Any] = dict(toml_config)
    merged.update({k: v for k, v in overrides.items() if v is not None})
    return cls.model_validate(merged)


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Searches `start_path` and its parents for 'pyproject.toml' and extracts config.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The config dict and the directory definition was found in.
  """
  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.exists() and toml_path.is_file():
      try:
        with open(toml_path, "rb") as f:
          data = tomllib.load(f)
      except (OSError, tomllib.TOMLDecodeError) as e:
        log_warning(f"Ignoring unreadable config [path]{toml_path}[/path]: {e}")
        return {}, None

      tool_section = data.get("tool", {})
      return tool_section.get("ir_lowering", {}), parent

  return {}, None
