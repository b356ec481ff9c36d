import sys
from pathlib import Path
from collections import deque
from copy import deepcopy
import logging
import threading
import time
from typing import Any, Dict

# Add the project root to the Python path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from flask import Flask, jsonify, request

from src.starforge.core.ids import SystemId
from src.starforge.core.rng import get_seeded_rng
from src.starforge.core.state import UniverseState
import src.starforge.core.sim as sim
from src.starforge.bodies.solar_system import SolarSystem
from src.starforge.generation.load import load_generation_config
from src.starforge.generation.names import default_name_table
from src.starforge.generation.system_gen import generate_universe
from src.starforge.reports.system_cards import generate_system_card_report

logger = logging.getLogger(__name__)

app = Flask(__name__)

DATA_PATH = Path(__file__).parent.parent / "data"
GENERATION_CONFIG = load_generation_config(DATA_PATH / "generation" / "distributions.yaml")

SEED = 40 # Fixed seed for consistent generation
N_SYSTEMS = 12
TICK_DAYS = sim.DEFAULT_TICK_DAYS

# Global variables to store the universe state and cached data
universe = None
cached_systems = []
sim_controller = None


class SimulationController:
    def __init__(self, initial_state: UniverseState, tick_days: float = TICK_DAYS, tick_interval_s: float = 0.5, max_history: int = 500):
        self._lock = threading.RLock()
        self._stop_event = threading.Event()
        self._thread = None
        self._running = False
        self._tick_days = tick_days
        self._tick_interval_s = tick_interval_s
        self._history = deque(maxlen=max_history)
        self._state = initial_state
        self._history.append(deepcopy(self._state))

    def get_state(self) -> UniverseState:
        with self._lock:
            return self._state

    def lock(self):
        return self._lock

    def is_running(self) -> bool:
        with self._lock:
            return self._running

    def tick_count(self) -> int:
        with self._lock:
            return self._state.tick

    def play(self):
        with self._lock:
            self._running = True
            if self._thread is None or not self._thread.is_alive():
                self._thread = threading.Thread(target=self._run_loop, daemon=True)
                self._thread.start()

    def pause(self):
        with self._lock:
            self._running = False

    def step_once(self):
        with self._lock:
            try:
                sim.step(self._state, self._tick_days)
                self._history.append(deepcopy(self._state))
            except Exception:
                self._running = False
                logger.exception("sim.step failed in step_once")
                raise

    def rewind(self, steps: int = 1):
        with self._lock:
            if steps <= 0:
                return
            for _ in range(steps):
                if len(self._history) > 1:
                    self._history.pop()
            self._state = deepcopy(self._history[-1])

    def stop(self):
        self._stop_event.set()

    def _run_loop(self):
        while not self._stop_event.is_set():
            with self._lock:
                if self._running:
                    try:
                        sim.step(self._state, self._tick_days)
                        self._history.append(deepcopy(self._state))
                    except Exception:
                        self._running = False
                        logger.exception("sim.step failed in run loop")
            time.sleep(self._tick_interval_s)


def _system_to_node(system_id: SystemId, system: SolarSystem) -> Dict[str, Any]:
    return {
        "id": str(system_id),
        "name": system.get_name(),
        "menu_color": system.get_menu_color().value,
        "properties": system.get_properties(),
        "star": {
            "name": system.get_star().get_name(),
            "menu_color": system.get_star().get_menu_color().value,
            "properties": system.get_star().get_properties(),
        },
        "planets": [
            {
                "name": planet.get_name(),
                "menu_color": planet.get_menu_color().value,
                "orbit_radius": planet.get_orbit_radius(),
                "orbit_position": planet.get_orbit_position(),
                "properties": planet.get_properties(),
            }
            for planet in system.get_satellites()
        ],
    }


def _rebuild_cache_from_state(state: UniverseState):
    global cached_systems
    cached_systems = [_system_to_node(system_id, system) for system_id, system in state.systems.items()]


def _initialize_universe_and_cache():
    global universe, sim_controller

    rng = get_seeded_rng(SEED)
    universe = generate_universe(rng, n_systems=N_SYSTEMS, config=GENERATION_CONFIG, names=default_name_table())
    logger.info("Universe generated with %d systems", len(universe.systems))

    _rebuild_cache_from_state(universe)
    sim_controller = SimulationController(universe)


def _sync_cache_from_controller():
    if sim_controller is None:
        return
    with sim_controller.lock():
        state = sim_controller.get_state()
        _rebuild_cache_from_state(state)


@app.before_request
def before_first_request():
    if universe is None or sim_controller is None:
        _initialize_universe_and_cache()


@app.route('/sim/state')
def sim_state():
    if sim_controller is None:
        return jsonify({"error": "Universe not initialized"}), 500
    _sync_cache_from_controller()
    with sim_controller.lock():
        elapsed = sim_controller.get_state().elapsed
    return jsonify({
        "systems": cached_systems,
        "meta": {
            "running": sim_controller.is_running(),
            "tick": sim_controller.tick_count(),
            "elapsed_days": elapsed,
        },
    })


@app.route('/systems/<system_id>')
def system_detail(system_id: str):
    if sim_controller is None:
        return jsonify({"error": "Universe not initialized"}), 500
    with sim_controller.lock():
        state = sim_controller.get_state()
        try:
            system = state.get_system(SystemId(system_id))
        except KeyError:
            return jsonify({"error": f"Unknown system '{system_id}'"}), 404
        node = _system_to_node(SystemId(system_id), system)
        node["card"] = generate_system_card_report(system)
    return jsonify(node)


@app.route('/sim/play', methods=['POST'])
def sim_play():
    if sim_controller is None:
        return jsonify({"error": "Universe not initialized"}), 500
    sim_controller.play()
    return jsonify({"status": "playing"})


@app.route('/sim/pause', methods=['POST'])
def sim_pause():
    if sim_controller is None:
        return jsonify({"error": "Universe not initialized"}), 500
    sim_controller.pause()
    return jsonify({"status": "paused"})


@app.route('/sim/step', methods=['POST'])
def sim_step():
    if sim_controller is None:
        return jsonify({"error": "Universe not initialized"}), 500
    data = request.get_json(silent=True) or {}
    steps = int(data.get("steps", 1))
    steps = max(1, steps)
    for _ in range(steps):
        sim_controller.step_once()
    return jsonify({"status": "stepped", "steps": steps, "tick": sim_controller.tick_count()})


@app.route('/sim/rewind', methods=['POST'])
def sim_rewind():
    if sim_controller is None:
        return jsonify({"error": "Universe not initialized"}), 500
    data = request.get_json(silent=True) or {}
    steps = int(data.get("steps", 1))
    steps = max(1, steps)
    sim_controller.rewind(steps=steps)
    return jsonify({"status": "rewound", "steps": steps, "tick": sim_controller.tick_count()})


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    app.run(debug=True)
