"""Jinja2 prompt templates loaded from YAML configuration."""

from .prompt_templates import PromptConfig, PromptTemplateEngine, get_template_engine

__all__ = ['PromptConfig', 'PromptTemplateEngine', 'get_template_engine']
