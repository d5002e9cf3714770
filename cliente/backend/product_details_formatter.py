"""Pure formatters for product details (dialog, clipboard and print)."""

from __future__ import annotations

import html

from parametros import (
    CURRENCY_LABEL,
    LOW_STOCK_THRESHOLD,
    MEDIUM_STOCK_THRESHOLD,
    PLACEHOLDER_IMAGE_URL,
)
from shared.protocol import Location, Product, Stock

STOCK_LEVEL_LOW = "low"
STOCK_LEVEL_MEDIUM = "medium"
STOCK_LEVEL_HIGH = "high"

STOCK_LEVEL_COLORS: dict[str, str] = {
    STOCK_LEVEL_LOW: "#dc2626",
    STOCK_LEVEL_MEDIUM: "#f97316",
    STOCK_LEVEL_HIGH: "#16a34a",
}


def stock_level(quantity: int) -> str:
    """Classifies a quantity as low (< 10), medium (<= 20) or high."""
    if quantity < LOW_STOCK_THRESHOLD:
        return STOCK_LEVEL_LOW
    if quantity <= MEDIUM_STOCK_THRESHOLD:
        return STOCK_LEVEL_MEDIUM
    return STOCK_LEVEL_HIGH


def format_price(amount: float) -> str:
    """Formats an amount with two decimals and the currency label."""
    return f"{amount:,.2f} {CURRENCY_LABEL}"


def format_location(location: Location) -> str:
    return f"{location.city} (Lat: {location.latitude}, Lng: {location.longitude})"


def format_stock_line(stock: Stock) -> str:
    return f"{stock.name}: {stock.quantity} ({stock.localisation.city})"


def format_product_details_text(product: Product) -> str:
    """Builds the details block as ``Campo: valor`` lines."""
    lines = [
        product.name,
        f"Tipo: {product.type}",
        f"Precio: {format_price(product.price)}",
    ]
    if product.solde is not None:
        lines.append(f"Precio rebajado: {format_price(product.solde)}")
    lines.append(f"Proveedor: {product.supplier}")
    lines.append(f"Codigo de barras: {product.barcode}")

    if product.stocks:
        lines.append("Stocks:")
        lines.extend(f"- {format_stock_line(stock)}" for stock in product.stocks)
    else:
        lines.append("Stocks: sin stock registrado")

    return "\n".join(lines)


def format_product_details_html(product: Product) -> str:
    """Builds a printable HTML document for a product."""
    image = html.escape(product.image or PLACEHOLDER_IMAGE_URL, quote=True)
    name = html.escape(product.name)
    parts = [
        f"<h1>{name}</h1>",
        f'<img src="{image}" alt="{html.escape(product.name, quote=True)}" width="300" />',
        f"<p><strong>Tipo:</strong> {html.escape(product.type)}</p>",
        f"<p><strong>Precio:</strong> {html.escape(format_price(product.price))}</p>",
    ]
    if product.solde is not None:
        parts.append(
            f"<p><strong>Precio rebajado:</strong> {html.escape(format_price(product.solde))}</p>"
        )
    parts.append(f"<p><strong>Proveedor:</strong> {html.escape(product.supplier)}</p>")
    parts.append(f"<p><strong>Codigo de barras:</strong> {html.escape(product.barcode)}</p>")
    parts.append("<h2>Stocks:</h2>")
    parts.append("<ul>")
    for stock in product.stocks:
        parts.append(
            f"<li><strong>{html.escape(stock.name)}</strong>: {stock.quantity} "
            f"({html.escape(stock.localisation.city)})</li>"
        )
    parts.append("</ul>")
    return "\n".join(parts)


def format_scan_summary_html(product: Product) -> str:
    """Builds the rich-text card shown after a scan, with colored quantities."""
    stock_lines = "".join(
        f"<li>{html.escape(stock.name)}: "
        f'<span style="color:{STOCK_LEVEL_COLORS[stock_level(stock.quantity)]};">'
        f"{stock.quantity}</span> ({html.escape(stock.localisation.city)})</li>"
        for stock in product.stocks
    )
    return (
        f"<h3>{html.escape(product.name)}</h3>"
        f"<p>{html.escape(product.type)} · {html.escape(product.supplier)}</p>"
        f"<p>Precio: {html.escape(format_price(product.price))}</p>"
        f"<ul>{stock_lines}</ul>"
    )
