# congestion/ui.py
import logging
import os
from datetime import datetime
from congestion.data_manager import load_crossings
from congestion.errors import ComputationError, InvalidInputError
from congestion.fee_engine import compute_daily_tax
from congestion.vehicles import VehicleCategory

logger = logging.getLogger(__name__)


def main():
    logging.basicConfig(level=os.getenv("CONGESTION_LOG_LEVEL", "WARNING").upper())

    print("\n============================================")
    print("        Congestion Tax Calculator           ")
    print("============================================")
    while True:
        print("\nSelect an action:")
        print("1. Compute tax manually")
        print("2. Compute tax from recorded crossings")
        print("3. Exit\n")
        choice = input(">> ").strip()

        if choice == "1":
            compute_tax_manual()
        elif choice == "2":
            compute_from_records()
        elif choice == "3":
            print("Goodbye!")
            break
        else:
            print("Invalid choice.")


def compute_tax_manual():
    def prompt_category(prompt):
        opts_str = "/".join(c.value for c in VehicleCategory)
        while True:
            category = VehicleCategory.parse(input(f"{prompt} ({opts_str}): "))
            if category is not None:
                return category
            print(f"Invalid input. Please enter one of: {opts_str}")

    def prompt_date(prompt):
        while True:
            s = input(f"{prompt} (YYYY-MM-DD): ").strip()
            try:
                return datetime.strptime(s, "%Y-%m-%d").date()
            except ValueError:
                print("Invalid date. Please try again.")

    def prompt_times(prompt, day):
        while True:
            s = input(f"{prompt} (HH:MM, comma separated): ").strip()
            try:
                clocks = [datetime.strptime(t.strip(), "%H:%M").time() for t in s.split(",")]
                return [datetime.combine(day, c) for c in clocks]
            except ValueError:
                print("Invalid time list. Please enter times like 06:15, 07:40.")

    category = prompt_category("Vehicle category")
    day = prompt_date("Date")
    crossings = prompt_times("Crossing times", day)

    show_tax(None, category, crossings, day)


def compute_from_records():
    records = load_crossings("crossings.json")
    if not records:
        print("No recorded crossings found.")
        return

    print("\nRecorded days:")
    for r in records:
        print(f"{r['record_id']} | {r['vehicle']} | {len(r['crossings'])} crossings")

    try:
        rid = int(input("\nEnter Record ID: "))
    except ValueError:
        print("Invalid ID.")
        return

    record = next((r for r in records if r["record_id"] == rid), None)
    if not record:
        print("Record not found.")
        return

    crossings = record["crossings"]
    day = crossings[0].date() if crossings else None
    show_tax(record["record_id"], record["vehicle"], crossings, day)


def show_tax(record_id, vehicle, crossings, day):
    try:
        tax = compute_daily_tax(vehicle, crossings)
    except (InvalidInputError, ComputationError) as exc:
        logger.warning("Tax computation rejected: %s", exc.message)
        print(f"Could not compute tax: {exc.message}")
        return None

    print_receipt_output(
        record_id=record_id,
        tax=tax,
        day=day,
        crossings=len(crossings),
    )
    return tax


def print_receipt_output(record_id=None,
                         tax=None,
                         day=None,
                         crossings=0,
                         return_str=False):
    """Render a plain-text daily tax statement. If return_str=True, returns the text."""
    if tax.windows:
        window_lines = [
            f"{i:>2}. {w.anchor:%H:%M}-{w.crossings[-1]:%H:%M}  crossings: {len(w.crossings)}  fee: {w.fee}"
            for i, w in enumerate(tax.windows, start=1)
        ]
    else:
        window_lines = ["No charge: exempt vehicle"]

    sid = f"CTS-{record_id or datetime.now().strftime('%H%M%S')}"
    lines = [
        "==============================================",
        "        CONGESTION TAX DAILY STATEMENT",
        "==============================================",
        f"Statement ID       : {sid}",
        f"Vehicle Category   : {tax.category.value}",
        f"Date               : {day or 'N/A'}",
        f"Crossings          : {crossings}",
        "",
        "----------------------------------------------",
        "Charging Windows",
        "----------------------------------------------",
        *window_lines,
        "----------------------------------------------",
        f"Subtotal           : {tax.uncapped_total}",
        f"Daily Cap          : {tax.daily_cap}{' (applied)' if tax.capped else ''}",
        f"TOTAL TAX          : {tax.total}",
        "==============================================",
    ]
    output = "\n".join(lines) + "\n"
    if return_str:
        return output
    print(output, end="")


if __name__ == "__main__":
    main()
