"""
Prompt Template Engine for the title generation brief.
Handles configuration loading, rendering, and validation.
"""
import yaml
from typing import Dict, Any, Optional, List
from pathlib import Path
from jinja2 import Environment, StrictUndefined
from dataclasses import dataclass, field

from app.core.exceptions import ConfigurationError
from app.utils.logging import CorrelatedLogger


@dataclass
class PromptConfig:
    """Configuration for a complete prompt template."""
    system_role: str
    template: str
    response_format: Dict[str, str]
    directives: Dict[str, str] = field(default_factory=dict)


def _thousands(value: int) -> str:
    return f"{value:,}"


class PromptTemplateEngine:
    """
    Template engine for managing and rendering prompts.

    Features:
    - Per-language prompt files under ``app/config/prompts/<prompt_type>/``
    - Jinja2 rendering with strict undefined variables
    - Cached configuration loading
    """

    def __init__(self, config_dir: Optional[str] = None):
        """
        Initialize the template engine.

        Args:
            config_dir: Path to configuration directory. Defaults to app/config/
        """
        self.logger = CorrelatedLogger(__name__)

        # Set up configuration directory
        if config_dir is None:
            config_dir = Path(__file__).parent.parent

        self.config_dir = Path(config_dir)
        self.prompts_dir = self.config_dir / "prompts"

        self.jinja_env = Environment(
            trim_blocks=True,
            lstrip_blocks=True,
            autoescape=False,
            undefined=StrictUndefined
        )
        self.jinja_env.filters["thousands"] = _thousands

        # Cache for loaded configurations
        self._config_cache: Dict[str, Dict[str, Any]] = {}

        self.logger.info(f"PromptTemplateEngine initialized with config_dir: {config_dir}")

    def load_prompt_config(self, prompt_type: str, language: str = "en") -> PromptConfig:
        """
        Load prompt configuration for a prompt type and language.

        Raises:
            ConfigurationError: If configuration cannot be loaded
        """
        cache_key = f"{prompt_type}_{language}"

        if cache_key in self._config_cache:
            return self._build_prompt_config(self._config_cache[cache_key])

        config_path = self.prompts_dir / prompt_type / f"{language}.yaml"

        if not config_path.exists():
            raise ConfigurationError(
                f"prompts/{prompt_type}/{language}.yaml",
                f"Available languages: {self.get_available_languages(prompt_type)}"
            )

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config_data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"prompts/{prompt_type}/{language}.yaml", str(e))

        self._config_cache[cache_key] = config_data
        self.logger.info(f"Loaded prompt configuration: {prompt_type}/{language}")
        return self._build_prompt_config(config_data)

    def render_prompt(
        self,
        prompt_type: str,
        language: str = "en",
        **template_vars
    ) -> str:
        """
        Render the complete prompt with template variables.

        Args:
            prompt_type: Prompt family (e.g., 'title_generation')
            language: Language code (e.g., 'en')
            **template_vars: Variables to pass to the template

        Returns:
            Rendered prompt string
        """
        config = self.load_prompt_config(prompt_type, language)

        try:
            body = self.jinja_env.from_string(config.template).render(**template_vars)
        except Exception as e:
            self.logger.error(f"Failed to render prompt: {prompt_type}/{language} - {str(e)}")
            raise ConfigurationError(f"prompts/{prompt_type}/{language}.yaml", f"rendering failed: {e}")

        full_prompt = "\n".join([
            config.system_role,
            "",
            body.strip(),
            "",
            config.response_format.get("instruction", ""),
        ])

        self.logger.debug(f"Rendered prompt for {prompt_type}/{language} ({len(full_prompt)} chars)")
        return full_prompt

    def get_directive(self, prompt_type: str, key: str, language: str = "en") -> str:
        """Fetch one named directive from a prompt configuration."""
        config = self.load_prompt_config(prompt_type, language)
        if key not in config.directives:
            raise ConfigurationError(f"prompts/{prompt_type}/{language}.yaml", f"missing directive '{key}'")
        return config.directives[key]

    def get_available_languages(self, prompt_type: str) -> List[str]:
        """Get available language codes for a prompt type."""
        prompt_dir = self.prompts_dir / prompt_type

        if not prompt_dir.exists():
            return []

        return sorted(
            item.stem for item in prompt_dir.iterdir()
            if item.is_file() and item.suffix == '.yaml'
        )

    def validate_configuration(self, prompt_type: str, language: str = "en") -> bool:
        """
        Validate that a configuration is properly formatted.

        Raises:
            ConfigurationError: If configuration is invalid
        """
        config = self.load_prompt_config(prompt_type, language)
        setting = f"prompts/{prompt_type}/{language}.yaml"

        if not config.system_role.strip():
            raise ConfigurationError(setting, "system_role cannot be empty")

        if not config.template.strip():
            raise ConfigurationError(setting, "template cannot be empty")

        if "instruction" not in config.response_format:
            raise ConfigurationError(setting, "response_format.instruction is required")

        self.logger.info(f"Configuration validation passed: {prompt_type}/{language}")
        return True

    def _build_prompt_config(self, config_data: Dict[str, Any]) -> PromptConfig:
        """Build PromptConfig object from raw configuration data."""
        return PromptConfig(
            system_role=config_data.get('system_role', ''),
            template=config_data.get('template', ''),
            response_format=config_data.get('response_format', {}),
            directives=config_data.get('directives', {})
        )


# Global template engine instance
_template_engine = None

def get_template_engine() -> PromptTemplateEngine:
    """Get global template engine instance (singleton pattern)."""
    global _template_engine
    if _template_engine is None:
        _template_engine = PromptTemplateEngine()
    return _template_engine
