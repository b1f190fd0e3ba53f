#!/usr/bin/env python3
"""
split_the_bill.py — Friday pizza for three

================================================================================
THE SITUATION
================================================================================

Anna collects the order. Ben and Carla pay a little less than they owe,
Anna pays a little more. Is there enough money on the table?

    Anna   owes 15,13€   pays 17,00€   ->  1,87€ change
    Ben    owes  7,92€   pays  7,50€   ->  0,42€ missing
    Carla  owes  6,83€   pays  6,00€   ->  0,83€ missing

1,87€ of change covers the 1,25€ missing, so the group has enough. Ben and
Carla still owe Anna. If Anna only pays 16,00€, the group as a whole is
short and the delivery driver is waiting for more money.

================================================================================
"""

import logging

from pizzasplit import (
    EnoughInTotal,
    Money,
    Order,
    ParticipantDirectory,
    Settings,
    UnderpaidInTotal,
    configure_logging,
)


def build_order(directory: ParticipantDirectory, anna_pays: Money) -> Order:
    anna, ben, carla = (directory.register(name) for name in ("Anna", "Ben", "Carla"))

    order = Order(anna.id, settings=Settings.from_env())
    for person in (anna, ben, carla):
        order.add_participant(person.id)

    order.add_meal_for_participant(anna.id, "03", "large", Money.of(5, 50))
    order.add_meal_for_participant(anna.id, "17", "family", Money.of(7, 43))
    order.add_meal_for_participant(ben.id, "05", "small", Money.of(3, 50))
    order.add_meal_for_participant(ben.id, "22", "rice", Money.of(4, 42))

    # Carla's pizza comes with an extra
    meal = (
        order.meal_builder()
        .set_code("08")
        .set_variety("medium")
        .set_price(Money.parse("5,33"))
        .add_special_with_price("cheese crust", Money.of(1))
        .build()
    )
    order.get_participant(carla.id).add_meal(meal)

    order.get_participant(anna.id).set_tip(Money.of(2, 20))
    order.get_participant(carla.id).set_tip(Money.of(0, 50))

    order.get_participant(anna.id).set_paid(anna_pays)
    order.get_participant(ben.id).set_paid(Money.parse("7,50"))
    order.get_participant(carla.id).set_paid(Money.parse("6"))
    return order


def report(order: Order, directory: ParticipantDirectory) -> None:
    symbol = order.settings.currency_symbol
    print(f"Total price: {order.calculate_total_price().format(symbol)}")
    print(f"Total tip:   {order.calculate_total_tip().format(symbol)}")

    result = order.calculate_total_change()
    if isinstance(result, EnoughInTotal):
        names = ", ".join(sorted(directory.name_of(p) for p in result.paid_less))
        print(f"Enough money on the table, {result.change.format(symbol)} left over.")
        print(f"Still owe the group: {names}")
    elif isinstance(result, UnderpaidInTotal):
        names = ", ".join(sorted(directory.name_of(p) for p in result.paid_less))
        print(f"Collect {result.underpaid.format(symbol)} more.")
        print(f"Paid too little: {names}")
    else:
        print(f"Everybody paid enough. Change: {result.format(symbol)}")
    print()


def main():
    configure_logging(logging.WARNING)

    print("=" * 60)
    print("ANNA PAYS 17,00")
    print("=" * 60)
    directory = ParticipantDirectory()
    report(build_order(directory, Money.of(17)), directory)

    print("=" * 60)
    print("ANNA PAYS 16,00")
    print("=" * 60)
    directory = ParticipantDirectory()
    report(build_order(directory, Money.of(16)), directory)


if __name__ == "__main__":
    main()
