# practice_kit

A set of small, self-contained practice exercises. Each module solves one
task and can be imported on its own. The package has no dependencies
beyond the Python standard library (Python 3.10 or later).

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

| Module | What it does |
| --- | --- |
| `practice_kit.airport_robot` | Abstract `Greeter` with `language_name` and `greet`; `Italian` and `Portuguese` greeters; `say_hello(name, greeter)` |
| `practice_kit.animal_magic` | `roll_a_die` (1 to 19), `generate_wand_energy` (0.0 up to 12.0), `shuffle_animals` (eight animal names in random order) |
| `practice_kit.annalyn` | Boolean rules: `can_fast_attack`, `can_spy`, `can_signal_prisoner`, `can_free_prisoner` |
| `practice_kit.bird_watcher` | `total_bird_count`, `birds_in_week` (1-based weeks of seven days), `fix_bird_count_log` (adds one to every other day, in place) |
| `practice_kit.blackjack` | `parse_card` (0 for an unknown card), `first_turn` returning `"P"`, `"W"`, `"S"` or `"H"` |
| `practice_kit.booking` | Appointment dates: `schedule`, `has_passed`, `is_afternoon_appointment`, `description`, `anniversary_date`; parsed times are UTC |
| `practice_kit.card_tricks` | List helpers: `favorite_cards`, `get_item`, `set_item`, `prepend_items`, `remove_item` |
| `practice_kit.cars_assemble` | Production figures: `calculate_working_cars_per_hour`, `calculate_working_cars_per_minute`, `calculate_cost` |
| `practice_kit.census` | `Resident` dataclass with `has_required_info` and `delete`; `count` of residents with the required information |
| `practice_kit.chessboard` | A board maps files `"A"`–`"H"` to lists of booleans: `count_in_file`, `count_in_rank`, `count_all`, `count_occupied` |
| `practice_kit.collatz` | `collatz_conjecture` — steps needed to reach 1 |
| `practice_kit.diffsquares` | `square_of_sum`, `sum_of_squares`, `difference` |
| `practice_kit.election_day` | `VoteCounter`, `ElectionResult`, `new_vote_counter`, `vote_count`, `increment_vote_count`, `new_election_result`, `display_result`, `decrement_votes_of_candidate` |
| `practice_kit.elon` | Remote-controlled `Car` with `drive`, `display_distance`, `display_battery`, `can_finish` |
| `practice_kit.expenses` | `Record`, `DaysPeriod`, `UnknownCategoryError`, `filter_records`, `by_days_period`, `by_category`, `total_by_period`, `category_expenses` |
| `practice_kit.gigasecond` | `add_gigasecond` — adds 10**9 seconds, dropping fractions of a second |
| `practice_kit.gross_store` | `units`, `new_bill`, `add_item`, `remove_item`, `get_item` (returns `None` for an absent item) |
| `practice_kit.hamming` | `distance` between two strands of equal length |
| `practice_kit.greeting` | `hello_world` |
| `practice_kit.interest` | `interest_rate`, `interest`, `annual_balance_update`, `years_before_desired_balance` |
| `practice_kit.isogram` | `is_isogram`, ignoring case, hyphens and spaces |

## Examples

```python
from practice_kit.airport_robot import Italian, say_hello
from practice_kit.blackjack import first_turn
from practice_kit.collatz import collatz_conjecture
from practice_kit.hamming import distance
from practice_kit.booking import description

say_hello("Flora", Italian())        # 'I can speak Italian: Ciao Flora!'
first_turn("ace", "ten", "five")     # 'W'
collatz_conjecture(16)               # 4
distance("GGACGGATTCTG", "AGGACGGATTCT")  # 9
description("6/6/2005 10:30:00")
# 'You have an appointment on Monday, June 6, 2005, at 10:30.'
```

## Errors

Invalid input raises an exception:

- `collatz_conjecture` raises `ValueError` for a number that is not positive.
- `distance` raises `ValueError` for strands of different lengths.
- `category_expenses` raises `UnknownCategoryError` (a `ValueError`) for a
  category that has no records at all.
- The `booking` functions raise `ValueError` for text that does not match
  their date layout.
- `birds_in_week` raises `IndexError` for a week that is not wholly inside
  the log.

## What it does not do

This is a library only: it installs no command-line program, and nothing
is stored between calls.