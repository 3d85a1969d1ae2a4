"""
Opening-hours arithmetic.

Responsibilities:
- Parse clock-time text into minutes since midnight and back.
- Report whether a venue is open, opening soon or closed.
- Generate bookable time slots and two-hour availability windows.
- Keep all of the above correct for venues open past midnight.
"""
