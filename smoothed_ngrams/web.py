"""
N-gram Probability Web API

A Flask application exposing probability estimation and count tables
as JSON endpoints.
"""

from typing import Dict, List, Optional

from flask import Flask, jsonify, request

from .counting import count_bigrams, count_unigrams, frequency_of_frequencies, split
from .errors import InputError, NGramError
from .estimator import Order, estimate
from .smoothing import Options, SmoothingMethod


def _json_body() -> Dict:
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InputError("Request body must be a JSON object")
    return data


def _corpus_from_request(data: Dict, max_lines: int) -> List[str]:
    corpus = data.get('corpus')
    if corpus is None:
        text = data.get('text', '')
        if not isinstance(text, str):
            raise InputError("'text' must be a string")
        corpus = text.splitlines()
    if not isinstance(corpus, list) or not all(isinstance(line, str) for line in corpus):
        raise InputError("'corpus' must be a list of strings")
    if len(corpus) > max_lines:
        raise InputError(f"Corpus exceeds {max_lines:,} lines")
    return corpus


def _options_from_request(data: Dict) -> Options:
    method = data.get('smoothing')
    if method:
        try:
            return Options.from_method(SmoothingMethod(method), k=data.get('add_k', 1))
        except ValueError:
            raise InputError(f"Unknown smoothing method: {method}") from None
    good_turing = data.get('good_turing', False)
    if not isinstance(good_turing, bool):
        raise InputError(f"'good_turing' must be true or false, got {good_turing!r}")
    return Options(add_k=data.get('add_k', 0), good_turing=good_turing)


def _gram_to_json(gram):
    return list(gram) if isinstance(gram, tuple) else gram


def create_app(config: Optional[Dict] = None) -> Flask:
    """
    Build the Flask application.

    Args:
        config: Overrides for ``app.config`` (e.g. MAX_CORPUS_LINES)
    """
    app = Flask(__name__)
    app.config['MAX_CORPUS_LINES'] = 100_000
    if config:
        app.config.update(config)

    @app.errorhandler(NGramError)
    def handle_ngram_error(e):
        return jsonify({'error': str(e)}), 400

    @app.route('/api/methods')
    def api_methods():
        """List smoothing method names."""
        return jsonify([method.value for method in SmoothingMethod])

    @app.route('/api/estimate', methods=['POST'])
    def api_estimate():
        """Estimate probabilities for a posted corpus."""
        data = _json_body()
        try:
            order = Order(data.get('order', 'unigram'))
        except ValueError:
            raise InputError(f"Unknown order: {data.get('order')}") from None

        corpus = _corpus_from_request(data, app.config['MAX_CORPUS_LINES'])
        vocabulary = data.get('vocabulary', [])
        if not isinstance(vocabulary, list):
            raise InputError("'vocabulary' must be a list")
        if order == Order.BIGRAM:
            vocabulary = [tuple(pair) if isinstance(pair, list) else pair for pair in vocabulary]

        options = _options_from_request(data)
        table = estimate(order, corpus, vocabulary, options)

        return jsonify({
            'order': order.value,
            'smoothing': options.method.value,
            'probabilities': [
                {'gram': _gram_to_json(gram), 'p': p}
                for gram, p in sorted(table.items(), key=lambda item: (-item[1], item[0]))
            ]
        })

    @app.route('/api/frequencies', methods=['POST'])
    def api_frequencies():
        """Return raw counts and frequency of frequencies for a posted corpus."""
        data = _json_body()
        word_lists = split(_corpus_from_request(data, app.config['MAX_CORPUS_LINES']))

        unigram_counts = count_unigrams(word_lists)
        bigram_counts = count_bigrams(word_lists)

        return jsonify({
            'unigrams': [{'gram': w, 'count': c} for w, c in unigram_counts.most_common()],
            'bigrams': [{'gram': list(b), 'count': c} for b, c in bigram_counts.most_common()],
            'unigram_frequency_of_frequencies': {
                str(c): n for c, n in sorted(frequency_of_frequencies(unigram_counts).items())
            },
            'bigram_frequency_of_frequencies': {
                str(c): n for c, n in sorted(frequency_of_frequencies(bigram_counts).items())
            }
        })

    return app


if __name__ == '__main__':
    import argparse

    parser = argparse.ArgumentParser(description='N-gram Probability Web API')
    parser.add_argument('--host', default='127.0.0.1', help='Host to bind to')
    parser.add_argument('--port', type=int, default=5000, help='Port to bind to')
    parser.add_argument('--debug', action='store_true', help='Enable debug mode')

    args = parser.parse_args()

    print(f"\nStarting N-gram Probability API on http://{args.host}:{args.port}\n")

    create_app().run(host=args.host, port=args.port, debug=args.debug)
