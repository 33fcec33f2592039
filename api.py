"""
Flask REST API for ChainCalc
Evaluates expressions and exposes the calculation history as JSON
"""
import concurrent.futures
import logging
import math

from flask import Flask, Response, jsonify, request
from flask_cors import CORS

import config
from background import run_pi_estimation
from database import Database
from errors import DivisionByZero, StoreError
from evaluator import evaluate
from expression import token_from_dict
from formatting import format_expression, format_number
from graph_generator import GraphGenerator
from history_manager import Calculation, HistoryStore

logger = logging.getLogger(__name__)


def _json_number(value):
    """JSON has no inf or nan; send null and let `display` carry them"""
    return value if math.isfinite(value) else None


def _int_arg(value, name, minimum):
    """Read an integer request argument; ValueError if it is not one or is below `minimum`"""
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be an integer") from None
    if isinstance(value, bool) or number < minimum:
        raise ValueError(f"{name} must be at least {minimum}")
    return number


def _calculation_to_json(calc):
    return {
        'expression': format_expression(calc.expression),
        'result': _json_number(calc.result),
        'display': format_number(calc.result),
        'timestamp': calc.timestamp.strftime("%Y-%m-%d %H:%M:%S"),
    }


def create_app(db_path=None):
    app = Flask(__name__)
    CORS(app)  # Enable CORS for all routes

    # Initialize components
    db = Database(db_path or config.DB_PATH)
    history = HistoryStore(db)
    graph_generator = GraphGenerator(history)
    app.config['HISTORY'] = history

    @app.route('/api')
    def api_info():
        """API information"""
        return jsonify({
            'success': True,
            'data': {
                'name': config.APP_NAME,
                'version': config.VERSION,
                'endpoints': [
                    'POST /api/evaluate',
                    'GET /api/calculations',
                    'GET /api/graphs/results',
                    'GET /api/graphs/results.png',
                    'POST /api/pi',
                ],
            }
        })

    @app.route('/api/evaluate', methods=['POST'])
    def evaluate_expression():
        """Evaluate a token expression, optionally recording it"""
        try:
            payload = request.get_json(silent=True) or {}
            raw_tokens = payload.get('tokens')
            if not isinstance(raw_tokens, list):
                return jsonify({'success': False, 'error': "'tokens' must be a list"}), 400
            try:
                expression = tuple(token_from_dict(item) for item in raw_tokens)
            except ValueError as e:
                return jsonify({'success': False, 'error': str(e)}), 400

            try:
                result = evaluate(expression)
            except DivisionByZero as e:
                return jsonify({'success': False, 'error': str(e)}), 400

            data = {
                'expression': format_expression(expression),
                'result': _json_number(result),
                'display': format_number(result),
            }
            if payload.get('record'):
                try:
                    history.append(Calculation.create(expression, result))
                    data['recorded'] = True
                except StoreError as e:
                    logger.warning("Result not saved to history: %s", e)
                    data['recorded'] = False
                    data['warning'] = str(e)

            return jsonify({'success': True, 'data': data})
        except Exception as e:
            logger.exception("Evaluation request failed")
            return jsonify({'success': False, 'error': str(e)}), 500

    @app.route('/api/calculations')
    def get_calculations():
        """Get calculation history"""
        try:
            try:
                limit = _int_arg(request.args.get('limit', 50), 'limit', 0)
            except ValueError as e:
                return jsonify({'success': False, 'error': str(e)}), 400
            calculations = history.load(limit)
            formatted = [_calculation_to_json(c) for c in calculations]
            return jsonify({
                'success': True,
                'data': formatted,
                'count': len(formatted)
            })
        except Exception as e:
            return jsonify({'success': False, 'error': str(e)}), 500

    @app.route('/api/graphs/results')
    def get_results_graph_data():
        """Get calculation results as chart data"""
        try:
            data = graph_generator.get_results_data()
            data['values'] = [_json_number(value) for value in data['values']]
            return jsonify({'success': True, 'data': data})
        except Exception as e:
            return jsonify({'success': False, 'error': str(e)}), 500

    @app.route('/api/graphs/results.png')
    def get_results_graph_image():
        """Get calculation results as a PNG chart"""
        try:
            fig = graph_generator.create_results_graph()
            return Response(graph_generator.render_png(fig), mimetype='image/png')
        except Exception as e:
            return jsonify({'success': False, 'error': str(e)}), 500

    @app.route('/api/pi', methods=['POST'])
    def estimate_pi():
        """Estimate pi on a background worker"""
        try:
            payload = request.get_json(silent=True) or {}
            try:
                terms = _int_arg(payload.get('terms', config.PI_DEFAULT_TERMS), 'terms', 1)
            except ValueError as e:
                return jsonify({'success': False, 'error': str(e)}), 400
            if terms > config.PI_MAX_TERMS:
                return jsonify({
                    'success': False,
                    'error': f'terms must be at most {config.PI_MAX_TERMS}'
                }), 400

            task = run_pi_estimation(terms)
            try:
                value = task.result(timeout=config.PI_TASK_TIMEOUT)
            except concurrent.futures.TimeoutError:
                logger.warning("Pi estimation with %d terms still running after %ss",
                               terms, config.PI_TASK_TIMEOUT)
                return jsonify({
                    'success': False,
                    'error': f'Pi estimation did not finish within {config.PI_TASK_TIMEOUT} seconds'
                }), 503
            return jsonify({
                'success': True,
                'data': {'terms': terms, 'value': value, 'display': format_number(value)}
            })
        except Exception as e:
            return jsonify({'success': False, 'error': str(e)}), 500

    return app
