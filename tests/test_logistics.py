import pytest

from stockleague.logistics import (
    LogisticsError,
    Order,
    Product,
    Warehouse,
    main,
    parse_fields,
    run,
)


@pytest.fixture
def warehouse():
    w = Warehouse()
    w.add_product("banana", 30, 2, 50)
    w.add_product("apple", 10, 1, 40)
    w.add_order = None  # not used; keeps fixture plain
    w.new_order("alice")
    return w


def test_parse_fields_splits_on_colon():
    assert parse_fields("pen:5:1:10") == ["pen", "5", "1", "10"]


def test_add_product_ids_are_consecutive():
    w = Warehouse()
    assert w.add_product("a", 1, 1, 1) == 0
    assert w.add_product("b", 1, 1, 1) == 1
    assert w.products[1] == Product(1, "b", 1, 1, 1)


def test_new_order_starts_empty():
    w = Warehouse()
    assert w.new_order("bob") == 0
    assert w.orders[0] == Order(0, "bob")


def test_add_stock_and_missing_product():
    w = Warehouse()
    w.add_product("a", 1, 1, 5)
    w.add_stock(0, 7)
    assert w.products[0].stock == 12
    with pytest.raises(LogisticsError, match="Impossivel adicionar produto 3 ao stock"):
        w.add_stock(3, 1)


def test_add_to_order_conserves_stock(warehouse):
    before = warehouse.products[0].stock
    warehouse.add_to_order(0, 0, 4)
    warehouse.add_to_order(0, 0, 3)
    in_order = warehouse.orders[0].items[0]
    assert in_order == 7
    assert warehouse.products[0].stock + in_order == before


def test_add_to_order_error_order_checked_first(warehouse):
    with pytest.raises(LogisticsError) as exc:
        warehouse.add_to_order(9, 9, 1)
    assert str(exc.value) == (
        "Impossivel adicionar produto 9 a encomenda 9. Encomenda inexistente."
    )
    with pytest.raises(LogisticsError, match="Produto inexistente"):
        warehouse.add_to_order(0, 9, 1)


def test_add_to_order_insufficient_stock(warehouse):
    with pytest.raises(LogisticsError, match="Quantidade em stock insuficiente"):
        warehouse.add_to_order(0, 1, 41)
    assert warehouse.orders[0].items == {}


def test_weight_limit_is_200():
    w = Warehouse()
    w.add_product("heavy", 1, 200, 5)
    w.add_product("light", 1, 1, 5)
    w.new_order("c")
    w.add_to_order(0, 0, 1)
    assert w.orders[0].weight == 200
    with pytest.raises(LogisticsError, match="excede o maximo de 200"):
        w.add_to_order(0, 1, 1)


def test_remove_stock(warehouse):
    with pytest.raises(LogisticsError) as exc:
        warehouse.remove_stock(1, 41)
    assert str(exc.value) == (
        "Impossivel remover 41 unidades do produto 1 do stock. Quantidade insuficiente."
    )
    warehouse.remove_stock(1, 40)
    assert warehouse.products[1].stock == 0


def test_remove_from_order_restores_state(warehouse):
    stock = warehouse.products[0].stock
    warehouse.add_to_order(0, 0, 5)
    warehouse.remove_from_order(0, 0)
    assert warehouse.products[0].stock == stock
    assert warehouse.orders[0].weight == 0
    assert 0 not in warehouse.orders[0].items
    warehouse.remove_from_order(0, 1)
    assert warehouse.products[1].stock == 40


def test_remove_from_order_errors(warehouse):
    with pytest.raises(LogisticsError, match="remover produto 0 a encomenda 5"):
        warehouse.remove_from_order(5, 0)


def test_order_cost_single_unit(warehouse):
    warehouse.add_to_order(0, 1, 1)
    assert warehouse.order_cost(0) == warehouse.products[1].price
    with pytest.raises(LogisticsError, match="calcular custo da encomenda 4"):
        warehouse.order_cost(4)


def test_change_price_affects_cost(warehouse):
    warehouse.add_to_order(0, 1, 1)
    warehouse.change_price(1, 77)
    assert warehouse.order_cost(0) == 77
    with pytest.raises(LogisticsError, match="alterar preco do produto 8"):
        warehouse.change_price(8, 1)


def test_product_in_order(warehouse):
    assert warehouse.product_in_order(0, 1) == ("apple", 0)
    warehouse.add_to_order(0, 1, 3)
    assert warehouse.product_in_order(0, 1) == ("apple", 3)
    with pytest.raises(LogisticsError, match="listar produto 6"):
        warehouse.product_in_order(0, 6)


def test_max_product_first_order_wins(warehouse):
    assert warehouse.max_product(0) is None
    warehouse.new_order("bob")
    warehouse.new_order("carol")
    warehouse.add_to_order(1, 0, 2)
    warehouse.add_to_order(2, 0, 2)
    assert warehouse.max_product(0) == (1, 2)
    with pytest.raises(LogisticsError, match="listar maximo do produto 5"):
        warehouse.max_product(5)


def test_products_by_price_is_stable():
    w = Warehouse()
    w.add_product("z", 5, 1, 1)
    w.add_product("y", 1, 1, 1)
    w.add_product("x", 5, 1, 1)
    assert [p.description for p in w.products_by_price()] == ["y", "z", "x"]


def test_order_products_alphabetical(warehouse):
    warehouse.add_to_order(0, 0, 1)
    warehouse.add_to_order(0, 1, 2)
    listed = warehouse.order_products(0)
    assert [(p.description, q) for p, q in listed] == [("apple", 2), ("banana", 1)]


def test_order_client(warehouse):
    assert warehouse.order_client(0) == "alice"
    with pytest.raises(LogisticsError, match="Encomenda inexistente"):
        warehouse.order_client(3)


def test_run_session():
    lines = [
        "a pen:5:1:10",
        "a cup:2:3:4",
        "N",
        "A 0:0:2",
        "C 0",
        "E 0:1",
        "m 0",
        "l",
        "L 0",
        "q 9:1",
        "x",
        "a ignored:1:1:1",
    ]
    out = list(run(lines))
    assert out == [
        "Novo produto 0.",
        "Novo produto 1.",
        "Nova encomenda 0.",
        "Custo da encomenda 0 10.",
        "cup 0.",
        "Maximo produto 0 0 2.",
        "Produtos",
        "* cup 2 4",
        "* pen 5 8",
        "Encomenda 0",
        "* pen 5 2",
        "Impossivel adicionar produto 9 ao stock. Produto inexistente.",
    ]


def test_run_client_listing():
    out = list(run(["N bob", "V 0", "V 1"]))
    assert out == [
        "Nova encomenda 0.",
        "0 bob",
        "Impossivel listar encomenda 1. Encomenda inexistente.",
    ]


def test_main_reads_stdin(monkeypatch, capsys):
    import io

    monkeypatch.setattr("sys.stdin", io.StringIO("a pen:1:1:1\nx\n"))
    assert main() == 0
    assert capsys.readouterr().out == "Novo produto 0.\n"