"""
Module entry point for: python -m pdf_kit

Allows running the toolkit directly as a module:
    python -m pdf_kit lines <pdf_path>
    python -m pdf_kit search <pdf_path> <term>
    python -m pdf_kit extract <input_pdf> <output_pdf> <page>...
"""

from .cli import cli


def main():
    cli()


if __name__ == "__main__":
    main()
