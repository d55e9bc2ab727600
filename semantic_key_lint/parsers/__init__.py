from .yaml_parser import DocumentParser, document_parser
