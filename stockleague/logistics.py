"""Product stock and customer orders for a small warehouse, driven by line commands."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Callable, Iterable, Iterator

MAX_ORDER_WEIGHT = 200
SEPARATOR = ":"


class LogisticsError(Exception):
    """Raised when a warehouse operation cannot be carried out."""


@dataclass
class Product:
    """A product known to the warehouse."""

    id: int
    description: str
    price: int
    weight: int
    stock: int


@dataclass
class Order:
    """A customer order: product ids mapped to the quantities ordered."""

    id: int
    client: str
    weight: int = 0
    items: dict[int, int] = field(default_factory=dict)


class Warehouse:
    """Holds every product and order, identified by consecutive ids from 0."""

    def __init__(self) -> None:
        self.products: list[Product] = []
        self.orders: list[Order] = []

    def _has_product(self, product_id: int) -> bool:
        return 0 <= product_id < len(self.products)

    def _has_order(self, order_id: int) -> bool:
        return 0 <= order_id < len(self.orders)

    def add_product(self, description: str, price: int, weight: int, stock: int) -> int:
        """Register a new product and return its id."""
        product = Product(len(self.products), description, price, weight, stock)
        self.products.append(product)
        return product.id

    def add_stock(self, product_id: int, quantity: int) -> None:
        if not self._has_product(product_id):
            raise LogisticsError(
                f"Impossivel adicionar produto {product_id} ao stock. Produto inexistente."
            )
        self.products[product_id].stock += quantity

    def new_order(self, client: str) -> int:
        """Open an empty order and return its id."""
        order = Order(len(self.orders), client)
        self.orders.append(order)
        return order.id

    def add_to_order(self, order_id: int, product_id: int, quantity: int) -> None:
        prefix = f"Impossivel adicionar produto {product_id} a encomenda {order_id}."
        if not self._has_order(order_id):
            raise LogisticsError(f"{prefix} Encomenda inexistente.")
        if not self._has_product(product_id):
            raise LogisticsError(f"{prefix} Produto inexistente.")
        product = self.products[product_id]
        order = self.orders[order_id]
        if product.stock < quantity:
            raise LogisticsError(f"{prefix} Quantidade em stock insuficiente.")
        added_weight = product.weight * quantity
        if order.weight + added_weight > MAX_ORDER_WEIGHT:
            raise LogisticsError(
                f"{prefix} Peso da encomenda excede o maximo de {MAX_ORDER_WEIGHT}."
            )
        order.weight += added_weight
        product.stock -= quantity
        order.items[product_id] = order.items.get(product_id, 0) + quantity

    def remove_stock(self, product_id: int, quantity: int) -> None:
        if not self._has_product(product_id):
            raise LogisticsError(
                f"Impossivel remover stock do produto {product_id}. Produto inexistente."
            )
        product = self.products[product_id]
        if quantity > product.stock:
            raise LogisticsError(
                f"Impossivel remover {quantity} unidades do produto {product_id} do stock."
                " Quantidade insuficiente."
            )
        product.stock -= quantity

    def remove_from_order(self, order_id: int, product_id: int) -> None:
        """Take a product out of an order, returning its quantity to stock."""
        prefix = f"Impossivel remover produto {product_id} a encomenda {order_id}."
        if not self._has_order(order_id):
            raise LogisticsError(f"{prefix} Encomenda inexistente.")
        if not self._has_product(product_id):
            raise LogisticsError(f"{prefix} Produto inexistente.")
        order = self.orders[order_id]
        quantity = order.items.pop(product_id, None)
        if quantity is None:
            return
        product = self.products[product_id]
        product.stock += quantity
        order.weight -= quantity * product.weight

    def order_cost(self, order_id: int) -> int:
        if not self._has_order(order_id):
            raise LogisticsError(
                f"Impossivel calcular custo da encomenda {order_id}. Encomenda inexistente."
            )
        items = self.orders[order_id].items
        return sum(self.products[pid].price * qty for pid, qty in items.items())

    def change_price(self, product_id: int, price: int) -> None:
        if not self._has_product(product_id):
            raise LogisticsError(
                f"Impossivel alterar preco do produto {product_id}. Produto inexistente."
            )
        self.products[product_id].price = price

    def product_in_order(self, order_id: int, product_id: int) -> tuple[str, int]:
        """Return the product's description and the quantity of it in the order."""
        if not self._has_order(order_id):
            raise LogisticsError(
                f"Impossivel listar encomenda {order_id}. Encomenda inexistente."
            )
        if not self._has_product(product_id):
            raise LogisticsError(
                f"Impossivel listar produto {product_id}. Produto inexistente."
            )
        quantity = self.orders[order_id].items.get(product_id, 0)
        return self.products[product_id].description, quantity

    def max_product(self, product_id: int) -> tuple[int, int] | None:
        """Return (order id, quantity) of the first order holding most of a product."""
        if not self._has_product(product_id):
            raise LogisticsError(
                f"Impossivel listar maximo do produto {product_id}. Produto inexistente."
            )
        best: tuple[int, int] | None = None
        best_quantity = 0
        for order in self.orders:
            quantity = order.items.get(product_id, 0)
            if quantity > best_quantity:
                best_quantity = quantity
                best = (order.id, quantity)
        return best

    def products_by_price(self) -> list[Product]:
        """Snapshots of every product, by ascending price, ties kept in id order."""
        return [replace(p) for p in sorted(self.products, key=lambda p: p.price)]

    def order_products(self, order_id: int) -> list[tuple[Product, int]]:
        """Products in an order with their quantities, sorted by description."""
        if not self._has_order(order_id):
            raise LogisticsError(
                f"Impossivel listar encomenda {order_id}. Encomenda inexistente."
            )
        items = self.orders[order_id].items
        entries = [(replace(self.products[pid]), items[pid]) for pid in sorted(items)]
        return sorted(entries, key=lambda entry: entry[0].description)

    def order_client(self, order_id: int) -> str:
        if not self._has_order(order_id):
            raise LogisticsError(
                f"Impossivel listar encomenda {order_id}. Encomenda inexistente."
            )
        return self.orders[order_id].client


def parse_fields(text: str) -> list[str]:
    """Split a command argument into its colon-separated fields."""
    return text.split(SEPARATOR)


def _numbers(fields: list[str], count: int) -> list[int]:
    padded = (fields + [""] * count)[:count]
    try:
        return [int(value) if value else 0 for value in padded]
    except ValueError as err:
        raise LogisticsError(f"Numero invalido: {err}") from None


def _cmd_add_product(w: Warehouse, info: str) -> Iterator[str]:
    description, *rest = parse_fields(info)
    price, weight, stock = _numbers(rest, 3)
    yield f"Novo produto {w.add_product(description, price, weight, stock)}."


def _cmd_add_stock(w: Warehouse, info: str) -> Iterator[str]:
    w.add_stock(*_numbers(parse_fields(info), 2))
    yield from ()


def _cmd_new_order(w: Warehouse, info: str) -> Iterator[str]:
    yield f"Nova encomenda {w.new_order(info)}."


def _cmd_add_to_order(w: Warehouse, info: str) -> Iterator[str]:
    w.add_to_order(*_numbers(parse_fields(info), 3))
    yield from ()


def _cmd_remove_stock(w: Warehouse, info: str) -> Iterator[str]:
    w.remove_stock(*_numbers(parse_fields(info), 2))
    yield from ()


def _cmd_remove_from_order(w: Warehouse, info: str) -> Iterator[str]:
    w.remove_from_order(*_numbers(parse_fields(info), 2))
    yield from ()


def _cmd_order_cost(w: Warehouse, info: str) -> Iterator[str]:
    (order_id,) = _numbers(parse_fields(info), 1)
    yield f"Custo da encomenda {order_id} {w.order_cost(order_id)}."


def _cmd_change_price(w: Warehouse, info: str) -> Iterator[str]:
    w.change_price(*_numbers(parse_fields(info), 2))
    yield from ()


def _cmd_product_in_order(w: Warehouse, info: str) -> Iterator[str]:
    description, quantity = w.product_in_order(*_numbers(parse_fields(info), 2))
    yield f"{description} {quantity}."


def _cmd_max_product(w: Warehouse, info: str) -> Iterator[str]:
    (product_id,) = _numbers(parse_fields(info), 1)
    best = w.max_product(product_id)
    if best is not None:
        yield f"Maximo produto {product_id} {best[0]} {best[1]}."


def _cmd_list_products(w: Warehouse, info: str) -> Iterator[str]:
    yield "Produtos"
    for product in w.products_by_price():
        yield f"* {product.description} {product.price} {product.stock}"


def _cmd_list_order(w: Warehouse, info: str) -> Iterator[str]:
    (order_id,) = _numbers(parse_fields(info), 1)
    entries = w.order_products(order_id)
    yield f"Encomenda {order_id}"
    for product, quantity in entries:
        yield f"* {product.description} {product.price} {quantity}"


def _cmd_order_client(w: Warehouse, info: str) -> Iterator[str]:
    (order_id,) = _numbers(parse_fields(info), 1)
    yield f"{order_id} {w.order_client(order_id)}"


_COMMANDS: dict[str, Callable[[Warehouse, str], Iterator[str]]] = {
    "a": _cmd_add_product,
    "q": _cmd_add_stock,
    "N": _cmd_new_order,
    "A": _cmd_add_to_order,
    "r": _cmd_remove_stock,
    "R": _cmd_remove_from_order,
    "C": _cmd_order_cost,
    "p": _cmd_change_price,
    "E": _cmd_product_in_order,
    "m": _cmd_max_product,
    "l": _cmd_list_products,
    "L": _cmd_list_order,
    "V": _cmd_order_client,
}


def run(lines: Iterable[str]) -> Iterator[str]:
    """Execute command lines against a fresh warehouse, yielding output lines.

    Processing stops at an ``x`` command; unknown commands are ignored.
    """
    warehouse = Warehouse()
    for raw in lines:
        line = raw.rstrip("\r\n")
        if not line:
            continue
        command = line[0]
        if command == "x":
            return
        handler = _COMMANDS.get(command)
        if handler is None:
            continue
        tokens = line[1:].split()
        info = tokens[0] if tokens else ""
        try:
            yield from handler(warehouse, info)
        except LogisticsError as err:
            yield str(err)


def main(argv: list[str] | None = None) -> int:
    """Read commands from standard input and print the results."""
    for output in run(sys.stdin):
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())