"""Expansion of the token table into the full utility class catalog."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Mapping

from .colors import calculate_shade
from .resolver import resolve_var
from .tokens import DEFAULT_BREAKPOINTS, SHADE_VALUES, TokenKind, classify_tokens, group_by_kind

logger = logging.getLogger(__name__)


@dataclass
class Catalog:
    """Class names, their details and the variant names, co-indexed.

    ``classes`` lists the plain classes first and then every variant
    prefixed copy (outer loop over variants).  Not every class has an
    entry in ``details``.
    """

    classes: List[str] = field(default_factory=list)
    details: Dict[str, str] = field(default_factory=dict)
    variants: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, object]:
        return {"classes": list(self.classes), "details": dict(self.details), "variants": list(self.variants)}


def _unique(values) -> List[str]:
    return list(dict.fromkeys(values))


def generate_classes_with_details(table: Mapping[str, str], namespace: str = "las-") -> Catalog:
    tokens = classify_tokens(table, namespace)
    grouped = group_by_kind(tokens)

    utilities = [token.name for token in grouped[TokenKind.UTILITY_FLAG] if token.value == "true"]

    shades: Dict[str, Dict[int, str]] = {}
    for token in grouped[TokenKind.COLOR_SHADE]:
        shades.setdefault(token.name, {})[token.shade] = resolve_var(token.value, table)
    defaults: Dict[str, str] = {}
    for token in grouped[TokenKind.COLOR_DEFAULT]:
        defaults[token.name] = resolve_var(token.value, table)
    color_names = _unique([*shades, *defaults])

    for name, rungs in shades.items():
        if rungs.get(500) and not defaults.get(name):
            defaults[name] = rungs[500]

    single_colors = [
        (token.name, resolve_var(token.value, table)) for token in grouped[TokenKind.SINGLE_COLOR]
    ]

    variants = _unique(
        [
            *(token.name for token in grouped[TokenKind.VARIANT]),
            *(token.name for token in grouped[TokenKind.BREAKPOINT]),
            *DEFAULT_BREAKPOINTS,
        ]
    )

    classes: List[str] = []
    details: Dict[str, str] = {}
    for utility in utilities:
        for color_name in color_names:
            explicit = shades.get(color_name, {})
            base_color = defaults.get(color_name)
            for shade in SHADE_VALUES:
                class_name = f"{utility}-{color_name}-{shade}"
                classes.append(class_name)
                if explicit.get(shade):
                    details[class_name] = explicit[shade]
                elif base_color:
                    shaded = calculate_shade(base_color, shade)
                    if shaded:
                        details[class_name] = shaded
        for color_name, value in single_colors:
            class_name = f"{utility}-{color_name}"
            classes.append(class_name)
            if value:
                details[class_name] = value

    prefixed: List[str] = []
    for variant in variants:
        for class_name in classes:
            variant_class = f"{variant}:{class_name}"
            prefixed.append(variant_class)
            if class_name in details:
                details[variant_class] = details[class_name]

    logger.debug(
        "Generated %d plain classes for %d utilities, %d colors and %d variants",
        len(classes),
        len(utilities),
        len(color_names),
        len(variants),
    )
    return Catalog(classes=classes + prefixed, details=details, variants=variants)


def generate_classes(table: Mapping[str, str], namespace: str = "las-") -> List[str]:
    """Class names only, for callers that do not need details."""
    return generate_classes_with_details(table, namespace).classes


__all__ = ["Catalog", "generate_classes", "generate_classes_with_details"]
