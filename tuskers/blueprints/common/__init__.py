from .params import IdConverter, parse_content_type, parse_limit, register_converters

__all__ = ['IdConverter', 'parse_content_type', 'parse_limit', 'register_converters']
