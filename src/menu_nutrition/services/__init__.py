"""
Service layer for menu-nutrition.

- ExportService: delimited text export of parsed menu rows
"""

from menu_nutrition.services.export_service import ExportService, format_nutrient

__all__ = [
    'ExportService',
    'format_nutrient',
]
