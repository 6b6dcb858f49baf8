# client/gen_data.py
import csv, io, random, uuid
from datetime import datetime, timedelta, timezone

MAKES = {
    "Honda": ["Civic", "Accord", "CR-V"],
    "Toyota": ["Corolla", "Camry", "RAV4"],
    "Ford": ["F-150", "Focus", "Escape"],
    "Tesla": ["Model 3", "Model Y"],
    "Subaru": ["Outback", "Forester"],
}
ZIPS = ["94107", "10001", "60601", "73301", "98101", "02108"]
VIN_CHARS = "ABCDEFGHJKLMNPRSTUVWXYZ0123456789"

# Providers spell the same column differently; the importer matches case-insensitively
HEADER_STYLES = {
    "canonical": ["UUID", "VIN", "Make", "Model", "Mileage", "Year", "Price", "Zip Code", "Create Date", "Update Date"],
    "lower":     ["uuid", "vin", "make", "model", "mileage", "year", "price", "zip code", "create date", "update date"],
    "upper":     ["UUID", "VIN", "MAKE", "MODEL", "MILEAGE", "YEAR", "PRICE", "ZIP CODE", "CREATE DATE", "UPDATE DATE"],
}

def _vin(): return "".join(random.choice(VIN_CHARS) for _ in range(17))
def _price(): return random.choice(["${:,.2f}", "{:.0f}", "USD {:,.0f}"]).format(random.randint(3000, 65000))
def _date_ago(days=0):
    dt = datetime.now(timezone.utc) - timedelta(days=days, hours=random.randint(0, 23))
    return random.choice([dt.isoformat(), dt.strftime("%m/%d/%Y"), dt.strftime("%b %d %Y %H:%M")])

def gen_vehicle_row():
    make = random.choice(list(MAKES))
    return [
        str(uuid.uuid4()),
        _vin(),
        make,
        random.choice(MAKES[make]),
        str(random.randint(0, 180000)),
        str(random.randint(2005, 2025)),
        _price(),
        random.choice(ZIPS),
        _date_ago(random.randint(30, 365)),
        _date_ago(random.randint(0, 29)),
    ]

def gen_vehicle_csv(n: int, header_style: str = "canonical", blank_every: int = 0, bad_dates: int = 0) -> str:
    """
    Build a provider-style CSV. `blank_every` inserts an empty line every N rows,
    `bad_dates` corrupts that many Create Date cells.
    """
    buf = io.StringIO()
    w = csv.writer(buf)
    headers = HEADER_STYLES[header_style]
    w.writerow(headers)
    rows = [gen_vehicle_row() for _ in range(n)]
    for i in random.sample(range(n), k=min(bad_dates, n)):
        rows[i][8] = random.choice(["n/a", "soon", "32/13/2020"])
    for i, row in enumerate(rows, start=1):
        w.writerow(row)
        if blank_every and i % blank_every == 0:
            w.writerow([""] * len(headers))
    return buf.getvalue()
