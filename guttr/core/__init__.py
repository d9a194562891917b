"""guttr.core: Foundation layer.

Contains the type definitions, padding builder, gutter generator, config
parser, report formatters and .env loading.
This module has NO dependencies on guttr.factory or guttr.__main__.
Only the standard library is allowed here.
"""
