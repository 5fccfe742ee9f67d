"""
main.py — Graph Algorithm Trace Flask App
==========================================
JSON API in front of the trace engines.  Rendering lives in the
browser; this side owns the graph document, runs algorithms and hands
out steps.

Routes:
  GET   /api/algorithms            – registry cards (label, pseudocode, …)
  GET   /api/graph                 – current graph document + problems
  POST  /api/graph/import          – replace graph with a {nodes, edges} document
  GET   /api/graph/export          – download the {nodes, edges} document
  POST  /api/graph/clear           – empty the graph
  POST  /api/graph/nodes           – add a node
  PATCH /api/graph/nodes/<id>      – move and/or rename a node
  POST  /api/graph/edges           – add an edge
  PATCH /api/graph/edges           – change an edge weight
  POST  /api/run                   – run an algorithm, return the trace
  POST  /api/step/next             – advance one step
  POST  /api/step/prev             – rewind one step
  POST  /api/step/goto             – jump to step N
  GET   /api/result                – final-result view of the current run
  GET   /api/state                 – current app state

State management:
  Everything lives in the Flask session:
    • graph            – the {nodes, edges} document
    • algorithm        – key of the last run
    • source / target
    • current_step
  The trace itself is NOT stored.  Engines are deterministic, so it is
  recomputed from (graph, algorithm, source, target) on each request.
  Any graph edit drops the run.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from flask import Flask, jsonify, request, session

from config import Config, DevelopmentConfig
from graph import GraphData, GraphError, GraphFormatError
from algorithms import get_algorithm, list_algorithms
from algorithms.dispatch import run_algorithm
from algorithms.step import AlgorithmStep
from playback import ResultTree, TracePlayer


RUN_KEYS = ("algorithm", "source", "target", "current_step")


def create_app(config_object: type = Config, overrides: Optional[Dict[str, Any]] = None) -> Flask:
    app = Flask(__name__)
    app.config.from_object(config_object)
    if overrides:
        app.config.update(overrides)

    # stats rows are an ORDERED mapping
    app.json.sort_keys = False

    level = app.config["LOG_LEVEL"]
    app.logger.setLevel(level)
    for name in ("algorithms", "graph", "playback"):
        logging.getLogger(name).setLevel(level)

    _register_routes(app)
    return app


# ---------------------------------------------------------------------------
# Session State Helpers
# ---------------------------------------------------------------------------
def get_graph() -> GraphData:
    """Deserialise graph from session, or start with an empty one."""
    return GraphData.from_dict(session.get("graph") or {"nodes": [], "edges": []})


def save_graph(graph: GraphData) -> None:
    session["graph"] = graph.to_dict()
    clear_run()


def clear_run() -> None:
    for key in RUN_KEYS:
        session.pop(key, None)


def get_state() -> Dict[str, Any]:
    return {
        "algorithm":    session.get("algorithm"),
        "source":       session.get("source"),
        "target":       session.get("target"),
        "current_step": session.get("current_step", 0),
    }


def current_trace(graph: GraphData) -> List[AlgorithmStep]:
    state = get_state()
    if state["algorithm"] is None:
        return []
    return run_algorithm(state["algorithm"], graph, state["source"], state["target"])


def json_object() -> Tuple[Dict[str, Any], Optional[str]]:
    """Request body as a dict: (body, error).  No body reads as {}."""
    data = request.get_json(silent=True)
    if data is None:
        return {}, None
    if not isinstance(data, dict):
        return {}, "Request body must be a JSON object"
    return data, None


def node_param(data: Dict[str, Any], key: str) -> Tuple[Optional[int], Optional[str]]:
    """Read an optional node id from a JSON body: (value, error)."""
    value = data.get(key)
    if value is None or value == "":
        return None, None
    if isinstance(value, bool):
        return None, f"'{key}' must be a node id"
    if isinstance(value, int):
        return value, None
    if isinstance(value, str) and value.strip().lstrip("-").isdigit():
        return int(value), None
    return None, f"'{key}' must be a node id"


def coord(data: Dict[str, Any], key: str, default: float) -> float:
    value = data.get(key, default)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise GraphFormatError(f"'{key}' must be a number")
    return float(value)


def step_payload(player: TracePlayer) -> Dict[str, Any]:
    step = player.current_step
    return {
        "current_step": player.current_idx,
        "total_steps":  player.total_steps,
        "is_finished":  player.current_idx == player.total_steps - 1,
        "step":         step.to_dict() if step else None,
    }


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------
def _register_routes(app: Flask) -> None:

    @app.errorhandler(GraphError)
    @app.errorhandler(GraphFormatError)
    def handle_graph_error(exc):
        app.logger.info("graph request rejected: %s", exc)
        return jsonify({"error": str(exc)}), 400

    # -- registry --
    @app.route("/api/algorithms")
    def api_algorithms():
        return jsonify({
            "default":    app.config["DEFAULT_ALGORITHM"],
            "algorithms": [a.to_dict() for a in list_algorithms()],
        })

    # -- graph document --
    @app.route("/api/graph")
    def api_graph():
        graph = get_graph()
        return jsonify({"graph": graph.to_dict(), "problems": graph.validate()})

    @app.route("/api/graph/import", methods=["POST"])
    def api_graph_import():
        data = request.get_json(silent=True)
        if data is None:
            return jsonify({"error": "Request body must be a JSON graph document"}), 400
        graph = GraphData.from_dict(data)
        save_graph(graph)
        app.logger.info("imported graph: %d nodes, %d edges", graph.node_count(), graph.edge_count())
        return jsonify({"graph": graph.to_dict(), "problems": graph.validate()})

    @app.route("/api/graph/export")
    def api_graph_export():
        response = jsonify(get_graph().to_dict())
        response.headers["Content-Disposition"] = "attachment; filename=graph.json"
        return response

    @app.route("/api/graph/clear", methods=["POST"])
    def api_graph_clear():
        graph = get_graph()
        graph.clear()
        save_graph(graph)
        return jsonify({"graph": graph.to_dict()})

    @app.route("/api/graph/nodes", methods=["POST"])
    def api_graph_add_node():
        data, err = json_object()
        if err:
            return jsonify({"error": err}), 400
        graph = get_graph()
        node_id, err = node_param(data, "id")
        if err:
            return jsonify({"error": err}), 400
        if node_id is None:
            node_id = graph.next_node_id()
        node = graph.create_node(node_id, coord(data, "x", 0.0), coord(data, "y", 0.0))
        save_graph(graph)
        return jsonify({"node": node.to_dict(), "graph": graph.to_dict()})

    @app.route("/api/graph/nodes/<int:node_id>", methods=["PATCH"])
    def api_graph_update_node(node_id: int):
        data, err = json_object()
        if err:
            return jsonify({"error": err}), 400
        graph = get_graph()
        new_id, err = node_param(data, "id")
        if err:
            return jsonify({"error": err}), 400
        if "x" in data or "y" in data:
            node = graph.get_node(node_id)
            if node is None:
                return jsonify({"error": f"Node {node_id} does not exist"}), 404
            graph.move_node(node_id, coord(data, "x", node.x), coord(data, "y", node.y))
        if new_id is not None:
            graph.rename_node(node_id, new_id)
        save_graph(graph)
        return jsonify({"graph": graph.to_dict()})

    @app.route("/api/graph/edges", methods=["POST"])
    def api_graph_add_edge():
        data, err = json_object()
        if err:
            return jsonify({"error": err}), 400
        graph = get_graph()
        source, err_s = node_param(data, "source")
        target, err_t = node_param(data, "target")
        if err_s or err_t or source is None or target is None:
            return jsonify({"error": err_s or err_t or "'source' and 'target' are required"}), 400
        edge = graph.create_edge(
            source, target,
            weight=data.get("weight", 1.0),
            directed=bool(data.get("directed", False)),
        )
        save_graph(graph)
        return jsonify({"edge": edge.to_dict(), "graph": graph.to_dict()})

    @app.route("/api/graph/edges", methods=["PATCH"])
    def api_graph_edge_weight():
        data, err = json_object()
        if err:
            return jsonify({"error": err}), 400
        graph = get_graph()
        source, err_s = node_param(data, "source")
        target, err_t = node_param(data, "target")
        if err_s or err_t or source is None or target is None:
            return jsonify({"error": err_s or err_t or "'source' and 'target' are required"}), 400
        edge = graph.set_weight(source, target, data.get("weight"))
        save_graph(graph)
        return jsonify({"edge": edge.to_dict(), "graph": graph.to_dict()})

    # -- run --
    @app.route("/api/run", methods=["POST"])
    def api_run():
        data, err = json_object()
        if err:
            return jsonify({"error": err}), 400
        graph = get_graph()

        algo_key = data.get("algorithm") or app.config["DEFAULT_ALGORITHM"]
        source, err_s = node_param(data, "source")
        target, err_t = node_param(data, "target")
        if err_s or err_t:
            return jsonify({"error": err_s or err_t}), 400

        trace = run_algorithm(algo_key, graph, source, target)
        session.update(algorithm=algo_key, source=source, target=target, current_step=0)
        app.logger.debug("run %s produced %d steps", algo_key, len(trace))

        player = TracePlayer(trace, speed=app.config["PLAYBACK_SPEED"])
        info   = get_algorithm(algo_key)
        return jsonify({
            "algorithm":  info.to_dict() if info else None,
            "speed":      player.speed,
            "trace":      [s.to_dict() for s in trace],
            **step_payload(player),
        })

    # -- step navigation --
    def navigate(move) -> Tuple[Any, int]:
        graph = get_graph()
        trace = current_trace(graph)
        if not trace:
            return jsonify({"error": "Run an algorithm first"}), 400
        player = TracePlayer(speed=app.config["PLAYBACK_SPEED"])
        player.load(trace, index=get_state()["current_step"])
        error = move(player)
        if error:
            return jsonify({"error": error}), 400
        session["current_step"] = player.current_idx
        return jsonify(step_payload(player)), 200

    @app.route("/api/step/next", methods=["POST"])
    def api_step_next():
        return navigate(lambda p: None if p.next_step() else "Already at last step")

    @app.route("/api/step/prev", methods=["POST"])
    def api_step_prev():
        return navigate(lambda p: None if p.prev_step() else "Already at first step")

    @app.route("/api/step/goto", methods=["POST"])
    def api_step_goto():
        data, err = json_object()
        if err:
            return jsonify({"error": err}), 400
        idx = data.get("index", 0)
        if isinstance(idx, bool) or not isinstance(idx, int):
            return jsonify({"error": "Invalid step index"}), 400
        return navigate(lambda p: None if p.goto_step(idx) else "Invalid step index")

    # -- results / state --
    @app.route("/api/result")
    def api_result():
        graph = get_graph()
        trace = current_trace(graph)
        if not trace:
            return jsonify({"error": "Run an algorithm first"}), 400
        return jsonify(ResultTree.from_trace(trace, graph).to_dict())

    @app.route("/api/state")
    def api_state():
        graph = get_graph()
        trace = current_trace(graph)
        return jsonify({
            **get_state(),
            "total_steps": len(trace),
            "node_ids":    graph.node_ids(),
        })


app = create_app()


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    dev = create_app(DevelopmentConfig)
    logging.basicConfig(level=dev.config["LOG_LEVEL"])
    dev.run(debug=True, host="0.0.0.0", port=5000)
