import dataclasses

import pytest

from drillings.structs import (
    ChangeColor,
    Cons,
    Echo,
    Move,
    Order,
    Package,
    Point,
    Quit,
    Rectangle,
    ReportCard,
    State,
    create_empty_list,
    create_non_empty_list,
    create_order_template,
)


def test_order_template_values():
    template = create_order_template()
    assert template == Order("Bob", 2019, False, False, True, 123, 0)


def test_your_order():
    order_template = create_order_template()
    your_order = dataclasses.replace(order_template, name="Hacker in Rust", count=1)
    assert your_order.name == "Hacker in Rust"
    assert your_order.year == order_template.year
    assert your_order.made_by_phone == order_template.made_by_phone
    assert your_order.made_by_mobile == order_template.made_by_mobile
    assert your_order.made_by_email == order_template.made_by_email
    assert your_order.item_number == order_template.item_number
    assert your_order.count == 1


def test_fail_creating_weightless_package():
    with pytest.raises(ValueError, match="below 10 grams"):
        Package("Spain", "Austria", 5)


def test_create_international_package():
    package = Package("Spain", "Russia", 1200)
    assert package.is_international() is True


def test_create_local_package():
    package = Package("Canada", "Canada", 1200)
    assert package.is_international() is False


def test_calculate_transport_fees():
    package = Package("Spain", "Spain", 1500)
    cents_per_gram = 3
    assert package.get_fees(cents_per_gram) == 4500
    assert package.get_fees(cents_per_gram * 2) == 9000


def test_match_message_call():
    state = State(
        quit=False,
        position=Point(0, 0),
        color=(0, 0, 0),
        message="hello world",
    )
    state.process(ChangeColor(255, 0, 255))
    state.process(Echo("Hello world!"))
    state.process(Move(Point(10, 15)))
    state.process(Quit())

    assert state.color == (255, 0, 255)
    assert state.position.x == 10
    assert state.position.y == 15
    assert state.quit is True
    assert state.message == "Hello world!"


def test_process_rejects_unknown_message():
    with pytest.raises(TypeError):
        State().process("jump")


def test_generate_numeric_report_card():
    report_card = ReportCard(grade=2.1, student_name="Tom Wriggle", student_age=12)
    assert report_card.report() == "Tom Wriggle (12) - achieved a grade of 2.1"


def test_generate_alphabetic_report_card():
    report_card = ReportCard(grade="A+", student_name="Gary Plotter", student_age=11)
    assert report_card.report() == "Gary Plotter (11) - achieved a grade of A+"


def test_correct_width_and_height():
    rect = Rectangle(10, 20)
    assert rect.width == 10
    assert rect.height == 20


def test_negative_width():
    with pytest.raises(ValueError, match="cannot be negative"):
        Rectangle(-10, 10)


def test_negative_height():
    with pytest.raises(ValueError, match="cannot be negative"):
        Rectangle(10, -10)


def test_create_empty_list():
    assert create_empty_list() is None


def test_create_non_empty_list():
    non_empty = create_non_empty_list()
    assert create_empty_list() != non_empty
    assert list(non_empty) == [1, 2, 3]


def test_cons_iteration_single():
    assert list(Cons(7)) == [7]