"""
Main entry point for apifilter.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Optional

from .config.settings import Settings, build_registry
from .query.filters import Filters
from .query.operators import OperatorRegistry
from .query.parser import QueryParametersParser
from .utils.logging import setup_logger


class ApiFilter:
    """
    Parses query parameters into filters for a query builder.

    Example:
        >>> api_filter = ApiFilter()
        >>> api_filter.register_operator("ne", "!=")
        >>> filters = api_filter.parse_parameters({"status": {"ne": "archived"}})
        >>> filters[0].symbol
        '!='
    """

    def __init__(
        self,
        registry: Optional[OperatorRegistry] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or Settings()
        self.registry = registry if registry is not None else build_registry(self.settings)
        self._parser = QueryParametersParser(self.registry)

    @classmethod
    def from_settings(cls, settings: Settings) -> ApiFilter:
        """Create an ApiFilter and configure the package logger from settings."""
        setup_logger(
            "apifilter",
            level=settings.log_level,
            format_string=settings.logging.format,
            log_file=settings.logging.log_file,
            date_format=settings.logging.date_format,
        )
        return cls(settings=settings)

    def parse_parameters(self, parameters: Mapping) -> Filters:
        """
        Parse decoded query parameters.

        Raises:
            InvalidArgumentError: If the parameters are invalid
        """
        return self._parser.parse(parameters)

    def register_operator(
        self,
        name: str,
        symbol: str,
    ) -> None:
        """
        Add a comparison operator usable in subsequent parse calls.

        Raises:
            ValueError: If the operator is already registered
        """
        self.registry.register_operator(name, symbol)

    def __repr__(self) -> str:
        return f"ApiFilter(operators={self.registry.list_operators()})"
