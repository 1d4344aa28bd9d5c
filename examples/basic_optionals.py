"""
Basic optionals: boundary conversion, lifted arithmetic, three-valued logic.

Run: python examples/basic_optionals.py
"""
from optionalpy import (
    from_nullable,
    lookup,
    parse_int,
    present,
    absent,
    and_,
    or_,
    sequence,
    using,
    ConsoleLogger,
)


def main():
    row = {"name": "John", "age": "41", "score": None}

    # Raw values enter the optional domain only at the boundary
    name = lookup(row, "name")
    age = lookup(row, "age").bind(parse_int)
    score = lookup(row, "score")

    # Lifted arithmetic propagates absence, comparisons are conservatively False
    print("age + 1 =>", age + 1)                    # Present(42)
    print("score * 2 =>", score * 2)                # Absent
    print("score > 10 =>", score > 10)              # False

    # Kleene logic: a determining operand wins over absence
    adult = age.map(lambda a: a >= 18)
    verified = from_nullable(row.get("verified"))
    print("adult AND verified =>", and_(adult, verified))   # Absent
    print("adult OR verified =>", or_(adult, verified))     # Present(True)
    print("NOT adult AND verified =>", and_(~adult, verified))  # Present(False)

    # Monadic chaining with a terminal unwrap
    full = name.bind(lambda n: present(n + " Doe")).get_or_else("?")
    print("full name =>", full)                      # John Doe
    print("missing =>", absent().map(str.upper).get_or_else("?"))

    print("all fields =>", sequence([name, age, score]))     # Absent

    # Boundary conversions are logged at DEBUG when asked for
    with using(logger=ConsoleLogger("demo", level="DEBUG")):
        from_nullable(row["score"]).trace("score")


if __name__ == "__main__":
    main()
