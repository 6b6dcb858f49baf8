import os, requests
from dotenv import load_dotenv
load_dotenv()
API = os.getenv("API_BASE_URL", "http://localhost:8000")
S = requests.Session()

def healthz():  r=S.get(f"{API}/healthz",timeout=10); r.raise_for_status(); return r.json()
def vehicles(limit: int = 50):
    r = S.get(f"{API}/vehicles", params={"limit": int(limit)}, timeout=30)
    r.raise_for_status()
    return r.json()

def import_csv(content: bytes, provider: str, filename: str = "vehicles.csv"):
    """POST a CSV file to /import (multipart: csv + provider)."""
    files = {"csv": (filename, content, "text/csv")}
    r = S.post(f"{API}/import", files=files, data={"provider": provider}, timeout=120)
    r.raise_for_status()
    return r.json()
