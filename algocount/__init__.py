"""Classic algorithms that count their basic operations, with growth data for best, average and worst cases."""

__version__ = "0.1.0"