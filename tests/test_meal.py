"""
test_meal.py — Tests for meals, specials, the factory and the builder
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from pizzasplit import (
    CountMismatch,
    IdProvider,
    Meal,
    MealBuilder,
    MealFactory,
    Money,
    NegativePriceBuilt,
    NotFound,
    Special,
)


# ==============================================================================
# IdProvider
# ==============================================================================

class TestIdProvider:

    def test_first_id_is_zero(self):
        assert IdProvider().next() == 0

    def test_second_id_is_one(self):
        ids = IdProvider()
        ids.next()
        assert ids.next() == 1

    def test_custom_base(self):
        ids = IdProvider(100)
        assert [ids.next() for _ in range(3)] == [100, 101, 102]

    def test_peek_does_not_consume(self):
        ids = IdProvider(5)
        assert ids.peek() == 5
        assert ids.next() == 5
        assert ids.peek() == 6

    def test_negative_base_raises(self):
        with pytest.raises(ValueError):
            IdProvider(-1)

    @given(n=st.integers(min_value=1, max_value=500))
    @settings(max_examples=50)
    def test_ids_never_repeat(self, n):
        ids = IdProvider()
        issued = [ids.next() for _ in range(n)]
        assert len(set(issued)) == n
        assert issued == sorted(issued)


# ==============================================================================
# Meal and Special
# ==============================================================================

class TestMeal:

    def make_meal(self):
        return Meal(0, "03", "large", Money.of(5, 50))

    def test_meal_can_be_created(self):
        meal = self.make_meal()
        assert meal.id == 0
        assert meal.code == "03"
        assert meal.variety == "large"
        assert meal.price == Money.of(5, 50)
        assert len(meal.specials) == 0

    def test_id_is_read_only(self):
        meal = self.make_meal()
        with pytest.raises(AttributeError):
            meal.id = 7

    def test_special_can_be_added(self):
        meal = self.make_meal()
        special = meal.add_special("cheese crust")

        assert special == Special(0, "cheese crust")
        assert meal.specials[0] is special

    def test_specials_get_unique_ids(self):
        meal = self.make_meal()
        first = meal.add_special("cheese crust")
        second = meal.add_special("cheese crust")
        assert first.id != second.id
        assert len(meal.specials) == 2

    def test_editing_returned_special_edits_the_meal(self):
        meal = self.make_meal()
        special = meal.add_special("chese crust")
        special.description = "cheese crust"

        assert meal.get_special(special.id).description == "cheese crust"
        assert meal.get_special(special.id).id == special.id

    def test_special_id_is_read_only(self):
        special = Special(3, "extra onions")
        with pytest.raises(AttributeError):
            special.id = 4

    def test_special_can_be_removed(self):
        meal = self.make_meal()
        special = meal.add_special("cheese crust")

        removed = meal.remove_special(special.id)

        assert removed is special
        assert meal == self.make_meal()

    def test_removing_missing_special_raises_not_found(self):
        meal = self.make_meal()
        special = meal.add_special("cheese crust")
        meal.remove_special(special.id)

        with pytest.raises(NotFound) as exc_info:
            meal.remove_special(special.id)
        assert exc_info.value.entry_id == special.id

    def test_removed_special_id_is_not_reused(self):
        meal = self.make_meal()
        first = meal.add_special("a")
        meal.remove_special(first.id)
        second = meal.add_special("b")
        assert second.id != first.id

    def test_specials_view_is_read_only(self):
        meal = self.make_meal()
        with pytest.raises(TypeError):
            meal.specials[0] = Special(0, "x")


# ==============================================================================
# MealFactory
# ==============================================================================

class TestMealFactory:

    def test_meal_can_be_created_through_factory(self):
        meal = MealFactory().create("03", "large", Money.of(5, 50))
        assert meal == Meal(0, "03", "large", Money.of(5, 50))

    def test_meals_from_same_factory_have_unique_ids(self):
        factory = MealFactory()
        first = factory.create("03", "large", Money.of(5, 50))
        second = factory.create("03", "large", Money.of(5, 50))
        assert first.id != second.id
        assert first != second

    def test_factory_base(self):
        factory = MealFactory(base=10)
        assert factory.create("01", "small", Money.of(4)).id == 10

    def test_special_id_base_reaches_meals(self):
        meal = MealFactory(special_id_base=50).create("01", "small", Money.of(4))
        assert meal.add_special("garlic").id == 50

    @given(count=st.integers(min_value=2, max_value=200))
    @settings(max_examples=50)
    def test_ids_unique_regardless_of_arguments(self, count):
        factory = MealFactory()
        meals = [factory.create("03", "large", Money.of(5, 50)) for _ in range(count)]
        assert len({meal.id for meal in meals}) == count


# ==============================================================================
# MealBuilder
# ==============================================================================

class TestMealBuilder:

    def test_build_simple_meal(self):
        meal = (
            MealBuilder(MealFactory())
            .set_code("03")
            .set_variety("large")
            .set_price(Money.of(5, 50))
            .build()
        )
        assert meal == Meal(0, "03", "large", Money.of(5, 50))

    def test_prices_accumulate(self):
        builder = (
            MealBuilder(MealFactory())
            .set_code("03")
            .set_price(Money.of(5, 50))
            .add_price(Money.of(1, 0))
            .subtract_price(Money.of(0, 20))
        )
        assert builder.current_price == Money.of(6, 30)
        assert builder.build().price == Money.of(6, 30)

    def test_subtract_below_zero_reports_overrun(self):
        builder = MealBuilder(MealFactory()).set_code("03").set_price(Money.of(1, 0))

        with pytest.raises(NegativePriceBuilt) as exc_info:
            builder.subtract_price(Money.of(1, 30))

        assert exc_info.value.amount == Money.of(0, 30)
        assert builder.current_price == Money.of(1, 0)

    def test_special_with_price(self):
        meal = (
            MealBuilder(MealFactory())
            .set_code("03")
            .set_variety("large")
            .set_price(Money.of(5, 50))
            .add_special_with_price("cheese crust", Money.of(1, 20))
            .build()
        )
        assert meal.price == Money.of(6, 70)
        assert [s.description for s in meal.specials.values()] == ["cheese crust"]

    def test_parallel_specials(self):
        meal = (
            MealBuilder(MealFactory())
            .set_code("07")
            .set_price(Money.of(4))
            .add_specials(["ham", "olives"], [Money.of(0, 80), Money.of(0, 50)])
            .build()
        )
        assert meal.price == Money.of(5, 30)
        assert len(meal.specials) == 2

    @pytest.mark.parametrize(
        "descriptions,prices,extra,on_description_side",
        [
            (["ham", "olives", "egg"], [Money.of(1)], 2, True),
            (["ham"], [Money.of(1), Money.of(2)], 1, False),
        ],
    )
    def test_count_mismatch(self, descriptions, prices, extra, on_description_side):
        builder = MealBuilder(MealFactory()).set_code("07").set_price(Money.of(4))

        with pytest.raises(CountMismatch) as exc_info:
            builder.add_specials(descriptions, prices)

        assert exc_info.value.extra_count == extra
        assert exc_info.value.on_description_side is on_description_side
        meal = builder.build()
        assert meal.price == Money.of(4)
        assert len(meal.specials) == 0

    def test_special_with_non_money_price_leaves_builder_unchanged(self):
        builder = MealBuilder(MealFactory()).set_code("07").set_price(Money.of(4))

        with pytest.raises(TypeError):
            builder.add_special_with_price("ham", 80)

        meal = builder.build()
        assert meal.price == Money.of(4)
        assert len(meal.specials) == 0

    def test_parallel_specials_with_non_money_price_attach_nothing(self):
        builder = MealBuilder(MealFactory()).set_code("07").set_price(Money.of(4))

        with pytest.raises(TypeError):
            builder.add_specials(["ham", "olives"], [Money.of(0, 80), 50])

        meal = builder.build()
        assert (meal.price, len(meal.specials)) == (Money.of(4), 0)

    def test_non_money_price_adjustments_raise(self):
        builder = MealBuilder(MealFactory()).set_code("07").set_price(Money.of(4))
        with pytest.raises(TypeError):
            builder.add_price(1.5)
        with pytest.raises(TypeError):
            builder.subtract_price(100)
        assert builder.current_price == Money.of(4)

    def test_build_without_code_raises(self):
        with pytest.raises(ValueError):
            MealBuilder(MealFactory()).set_price(Money.of(4)).build()

    def test_builder_uses_factory_ids(self):
        factory = MealFactory()
        factory.create("01", "small", Money.of(3))
        meal = MealBuilder(factory).set_code("02").build()
        assert meal.id == 1
