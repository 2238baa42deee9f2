from .text_processing import clean_json_tags, parse_json_response, truncate_content

__all__ = ["clean_json_tags", "parse_json_response", "truncate_content"]
