"""Errors raised by the data-access layer."""


class DuplicateProductCodeError(ValueError):
    """A product with the same ``product_code`` already exists."""

    def __init__(self, product_code: str):
        super().__init__(f"Product with product_code {product_code!r} already exists")
        self.product_code = product_code
