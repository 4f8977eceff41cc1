# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""ShopPage - Example page built with genro_domtree.

A didactic example showing a "cover" class that owns an HtmlDocument,
exposes the regions of the page, and lets callers plug content into
them with slots, conditionals and mapped lists.
"""

from __future__ import annotations

from dataclasses import dataclass

from genro_domtree import HtmlDocument, RefSequence, h, if_, raw, slot


@dataclass
class Product:
    name: str
    price: float
    in_stock: bool = True


class ShopPage:
    """A shop page with a header, a product list and a footer.

    Example:
        >>> page = ShopPage(title='Bottega')
        >>> page.add_product(Product('Tea & Biscuits', 4.5))
        >>> page.add_product(Product('<Cake>', 12, in_stock=False))
        >>> page.footer_supplier = lambda: h.small(['Open 9-18'])
        >>> html = page.render()
    """

    def __init__(self, title: str = '', lang: str = 'en'):
        """Create a new page.

        Args:
            title: Text of the <title> and of the main heading.
            lang: Value of the document ``lang`` attribute.
        """
        self.products: list[Product] = []
        self.user = {'admin': False}
        self.refs = RefSequence()
        self._footer = slot(children=['© Bottega'])
        self._document = self._build(title, lang)

    @property
    def document(self) -> HtmlDocument:
        """Access the underlying HtmlDocument."""
        return self._document

    @property
    def footer_supplier(self):
        return self._footer.supplier

    @footer_supplier.setter
    def footer_supplier(self, supplier):
        self._footer.supplier = supplier

    def add_product(self, product: Product) -> ShopPage:
        """Add a product; the list is rendered from self.products."""
        self.products.append(product)
        return self

    def _build(self, title: str, lang: str) -> HtmlDocument:
        search = self.refs.new_ref()
        return h.html({'lang': lang})(
            h.head()(
                h.meta(charset='utf-8'),
                h.title([title]),
            ),
            h.body(class_='shop')(
                h.header()(
                    h.h1([title]),
                    h.label({'for': search}, ['Search']),
                    h.input({'id': search, 'type': 'search', 'name': 'q'}),
                ),
                h.ul(class_='products').map(self.products, self._product_item),
                if_(lambda: not self.products)(h.p(['Nothing on the shelves today'])),
                if_(lambda: self.user['admin'])(
                    h.a({'href': '/admin'}, ['Manage products'])
                ),
                raw('<!-- products end -->'),
                h.footer()(self._footer),
            ),
        )

    def _product_item(self, product: Product, index: int):
        item = h.li({'data-index': index})
        item.classes('product', {'sold-out': not product.in_stock})
        item(
            h.span(class_='name')(product.name),
            ' ',
            h.span(class_='price')(f'{product.price:.2f}'),
        )
        return item

    def render(self) -> str:
        """Render the full document."""
        return str(self._document)


def demo():
    """Build and print a sample page."""
    page = ShopPage(title='Bottega')
    print(page.render())
    print()

    page.add_product(Product('Tea & Biscuits', 4.5))
    page.add_product(Product('<Cake>', 12, in_stock=False))
    page.user['admin'] = True
    page.footer_supplier = lambda: h.small(['Open 9-18'])
    print(page.render())


if __name__ == '__main__':
    demo()
