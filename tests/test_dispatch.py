import logging

import pytest

from acmegeom import NONE, DispatchError, GeometryError, Kind, Line, Plane, Point
from acmegeom.dispatch import ALL_PAIRS, SymmetricDispatch
from acmegeom.intersection import TABLE
from acmegeom.predicates import TABLES


def test_all_pairs_count():
    # 12 kinds, unordered pairs with repetition
    assert len(ALL_PAIRS) == 78


def test_register_and_swap():
    table = SymmetricDispatch('order')

    @table.register(Kind.LINE, Kind.PLANE)
    def _line_plane(a, b, tol):
        return (a.kind, b.kind)

    line = Line((0, 0, 0), (1, 0, 0))
    plane = Plane((0, 0, 0), (0, 0, 1))
    assert table(line, plane) == (Kind.LINE, Kind.PLANE)
    assert table(plane, line) == (Kind.LINE, Kind.PLANE)
    func, swapped = table.handler(Kind.PLANE, Kind.LINE)
    assert func is _line_plane and swapped
    func, swapped = table.handler('line', 'plane')
    assert not swapped


def test_duplicate_registration_rejected():
    table = SymmetricDispatch('dup')
    table.add(Kind.POINT, Kind.BOX, lambda a, b, tol: True)
    with pytest.raises(GeometryError):
        table.add(Kind.BOX, Kind.POINT, lambda a, b, tol: False)


def test_fill_completes_table():
    table = SymmetricDispatch('fill')
    assert not table.is_complete()
    assert len(table.missing()) == 78
    table.fill(lambda a, b, tol: NONE)
    assert table.is_complete()
    assert len(table) == 78


def test_fill_needs_a_default():
    with pytest.raises(GeometryError):
        SymmetricDispatch('empty').fill()


def test_missing_handler_without_default():
    table = SymmetricDispatch('sparse')
    with pytest.raises(GeometryError):
        table.handler(Kind.POINT, Kind.POINT)


def test_non_entity_operands():
    table = SymmetricDispatch('typed', default=lambda a, b, tol: True)
    with pytest.raises(DispatchError):
        table(Point(), (0, 0, 0))
    with pytest.raises(TypeError):
        table('point', Point())


@pytest.mark.parametrize('name', sorted(TABLES))
def test_predicate_tables_complete(name):
    assert TABLES[name].is_complete()


def test_intersection_table_complete():
    assert TABLE.is_complete()


def test_dispatch_logs_at_debug(caplog):
    table = SymmetricDispatch('logged', default=lambda a, b, tol: True)
    with caplog.at_level(logging.DEBUG, logger='acmegeom.dispatch'):
        table(Point(), Point())
    assert any('logged' in r.getMessage() for r in caplog.records)
