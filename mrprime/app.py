import logging
import time
from flask import Blueprint, Flask, request, jsonify
from werkzeug.exceptions import BadRequest

from .cli import parse_int
from .config import get_settings
from .miller_rabin import DETERMINISTIC_LIMIT, is_prime

log = logging.getLogger(__name__)

prime_bp = Blueprint("prime_bp", __name__)

# ------------------ helpers ------------------
def _read_params() -> tuple[int, int]:
    settings = get_settings()
    if request.method == "POST":
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise BadRequest("Provide a JSON object with n (and optionally k).")
        n_raw, k_raw = data.get("n"), data.get("k")
    else:
        n_raw, k_raw = request.args.get("n"), request.args.get("k")

    if n_raw is None or str(n_raw).strip() == "":
        raise BadRequest("missing n")
    try:
        n = parse_int(str(n_raw))
    except ValueError:
        raise BadRequest("n must be a decimal or 0x-prefixed hex integer")
    if n.bit_length() > settings.max_bits:
        raise BadRequest(f"Max {settings.max_bits} bits.")

    if k_raw is None or str(k_raw).strip() == "":
        k = settings.rounds
    else:
        try:
            k = int(str(k_raw).strip())
        except ValueError:
            raise BadRequest("k must be integer")
    if not 1 <= k <= settings.max_rounds:
        raise BadRequest(f"k must be between 1 and {settings.max_rounds}")
    return n, k

# ------------------ API ------------------
@prime_bp.get("/api/health")
def health():
    settings = get_settings()
    return jsonify({"ok": True, "parallel": settings.parallel, "workers": settings.workers,
                    "time": int(time.time())})

@prime_bp.route("/api/is_prime", methods=["GET", "POST"])
def api_is_prime():
    n, k = _read_params()
    t0 = time.perf_counter()
    verdict = is_prime(n, k)
    dt_ms = int((time.perf_counter() - t0) * 1000)
    log.info("is_prime bits=%d k=%d -> %s in %dms", n.bit_length(), k, verdict, dt_ms)
    return jsonify({"ok": True, "n": str(n), "bits": n.bit_length(), "k": k, "prime": verdict,
                    "exact": n <= DETERMINISTIC_LIMIT, "duration_ms": dt_ms})

@prime_bp.errorhandler(BadRequest)
def bad_request(e):
    return jsonify({"error": e.description}), 400


app = Flask(__name__)
app.register_blueprint(prime_bp)

if __name__ == "__main__":
    app.run(host="0.0.0.0", port=8080)
