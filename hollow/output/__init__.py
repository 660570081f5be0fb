from hollow.output.json_formatter import StubReportFormatter, format_stub, type_name

__all__ = ['StubReportFormatter', 'format_stub', 'type_name']
