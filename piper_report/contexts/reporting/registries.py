"""
Reporting Registries

Centralized registries for loading and caching report templates and report
configs. Each report type is a directory:

    types/{report_type}/template.txt.jinja   - Jinja2 report text
    types/{report_type}/report_config.yaml   - versions the template needs
"""

import os
from pathlib import Path
from typing import Any, Dict, List

from dotenv import load_dotenv
from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateNotFound
from omegaconf import OmegaConf

load_dotenv()
TYPES_PATH = Path(os.getenv("PIPER_REPORT_TYPES_PATH", Path(__file__).parent / "types"))

TEMPLATE_FILENAME = "template.txt.jinja"
CONFIG_FILENAME = "report_config.yaml"


class TemplateRegistry:
    """
    Registry for loading and caching Jinja2 report templates.

    Templates are stored in types/{report_type}/template.txt.jinja. Shared
    partials (e.g. the pipeline footer) live at the root of the types directory.
    """

    def __init__(self, types_base_path: Path = None):
        """
        Initialize the template registry.

        Args:
            types_base_path: Base path for report type directories. Defaults to
                           PIPER_REPORT_TYPES_PATH from environment
        """
        if types_base_path is None:
            types_base_path = TYPES_PATH

        self.types_base_path = Path(types_base_path)
        self._cache: Dict[str, Template] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(self.types_base_path)),
            # Catches silent failures
            undefined=StrictUndefined,
            # Block tags on their own line leave no blank line behind
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    def get_template(self, report_type: str) -> Template:
        """
        Get a template by report type, loading and caching it if necessary.

        Args:
            report_type: Name of the report type (e.g., 'rna_counts')

        Returns:
            Jinja2 Template object

        Raises:
            TemplateNotFound: If template file doesn't exist
            TemplateSyntaxError: If template has Jinja2 syntax errors
        """
        if report_type in self._cache:
            return self._cache[report_type]

        template_path = f"{report_type}/{TEMPLATE_FILENAME}"

        try:
            template = self.env.get_template(template_path)
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Template not found for report type '{report_type}' at {self.types_base_path / template_path}"
            ) from e

        self._cache[report_type] = template
        return template

    def get_template_path(self, report_type: str) -> Path:
        """
        Get the file path for a report type's template.

        Args:
            report_type: Name of the report type

        Returns:
            Path to template file
        """
        return self.types_base_path / report_type / TEMPLATE_FILENAME

    def clear_cache(self):
        """Clear the template cache."""
        self._cache.clear()

    def is_cached(self, report_type: str) -> bool:
        """Check if a template is in the cache."""
        return report_type in self._cache


class ReportConfigRegistry:
    """
    Registry for loading and caching report configs.

    Report configs are stored in types/{report_type}/report_config.yaml and map
    template variables to the archive resolvers and resource keys that supply
    their versions.
    """

    def __init__(self, types_base_path: Path = None):
        """
        Initialize the report config registry.

        Args:
            types_base_path: Base path for report type directories. Defaults to
                           PIPER_REPORT_TYPES_PATH from environment
        """
        if types_base_path is None:
            types_base_path = TYPES_PATH

        self.types_base_path = Path(types_base_path)
        self._cache: Dict[str, Dict[str, Any]] = {}

    def get_config(self, report_type: str) -> Dict[str, Any]:
        """
        Get a report config by report type, loading and caching it if necessary.

        Missing sections are filled with empty mappings.

        Args:
            report_type: Name of the report type (e.g., 'haloplex')

        Returns:
            Dict containing the report config

        Raises:
            FileNotFoundError: If config file doesn't exist
        """
        if report_type in self._cache:
            return self._cache[report_type]

        config_path = self.get_config_path(report_type)

        if not config_path.exists():
            raise FileNotFoundError(
                f"Report config not found for report type '{report_type}' at {config_path}"
            )

        config = OmegaConf.load(config_path)
        config_dict = OmegaConf.to_container(config, resolve=True) or {}
        for section in ("archive_versions", "resource_versions", "multi_file_versions"):
            config_dict[section] = config_dict.get(section) or {}

        self._cache[report_type] = config_dict
        return config_dict

    def get_config_path(self, report_type: str) -> Path:
        """Get the file path for a report type's config."""
        return self.types_base_path / report_type / CONFIG_FILENAME

    def available_types(self) -> List[str]:
        """
        List report types that have a config file.

        Returns:
            Sorted report type names
        """
        if not self.types_base_path.is_dir():
            return []
        return sorted(
            path.name
            for path in self.types_base_path.iterdir()
            if (path / CONFIG_FILENAME).exists()
        )

    def clear_cache(self):
        """Clear the report config cache."""
        self._cache.clear()

    def is_cached(self, report_type: str) -> bool:
        """Check if a report config is in the cache."""
        return report_type in self._cache
