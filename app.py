#!/usr/bin/env python3
"""
Flask web application for the search engine frontend.
"""

from flask import Flask, request, jsonify
from prefix_search.errors import SearchError, EmptyQuery, NoMatch, NoResults, PageOutOfRange
from prefix_search.pagination import paginate, page_window
from prefix_search.paths import DATA_DIR, RESULTS_PER_PAGE
from prefix_search.searcher import Searcher


def initialize_searcher(source=DATA_DIR):
    """Initialize the search engine. Returns None if the corpus fails to load."""
    try:
        print("Initializing search engine...")
        searcher = Searcher(source)
        print("Search engine initialized successfully")
        return searcher
    except SearchError as e:
        print(f"Error initializing search engine: {e}")
        return None


def create_app(searcher=None):
    app = Flask(__name__)

    @app.route('/search', methods=['POST'])
    def search():
        """Handle search requests."""
        if searcher is None:
            return jsonify({'error': 'Search engine not initialized'}), 500

        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}
        query = str(data.get('query', '')).strip()
        page = data.get('page', 1)

        if not query:
            return jsonify({'error': 'Please enter a search term.', 'kind': 'EmptyQuery'}), 400
        if not isinstance(page, int) or isinstance(page, bool):
            return jsonify({'error': 'Invalid page. Must be an integer'}), 400

        try:
            result = searcher.search(query)
            current = paginate(result.documents, page, RESULTS_PER_PAGE)
        except EmptyQuery as e:
            return jsonify({'error': str(e), 'kind': 'EmptyQuery'}), 400
        except NoMatch as e:
            return jsonify({'error': str(e), 'kind': 'NoMatch', 'token': e.token}), 404
        except NoResults as e:
            return jsonify({'error': str(e), 'kind': 'NoResults', 'searchTime': e.elapsed_ms}), 404
        except PageOutOfRange as e:
            return jsonify({'error': str(e), 'kind': 'PageOutOfRange'}), 400

        # Format results
        formatted_results = [
            {'docid': docid, 'projectId': docid + 1, 'name': name}
            for docid, name in current.items
        ]

        return jsonify({
            'results': formatted_results,
            'searchTime': result.elapsed_ms,
            'totalResults': len(result),
            'page': current.number,
            'totalPages': current.total_pages,
            'showing': [current.start, current.end],
            'pageWindow': page_window(current.number, current.total_pages),
            'query': query,
        })

    @app.route('/autocomplete', methods=['POST'])
    def autocomplete():
        """Suggest completions for the word under the caret."""
        if searcher is None:
            return jsonify({'error': 'Search engine not initialized'}), 500

        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}
        text = str(data.get('text', ''))
        caret = data.get('caret', len(text))
        if not isinstance(caret, int) or isinstance(caret, bool):
            return jsonify({'error': 'Invalid caret. Must be an integer'}), 400

        suggestions = searcher.autocomplete(text, caret)
        return jsonify({'suggestions': [s.to_dict() for s in suggestions]})

    @app.route('/health')
    def health():
        """Health check endpoint."""
        return jsonify({
            'status': 'healthy',
            'searcher_initialized': searcher is not None,
            'words': len(searcher.corpus.words) if searcher else 0,
            'projects': len(searcher.corpus.projects) if searcher else 0,
        })

    return app


if __name__ == '__main__':
    # Initialize the search engine
    app = create_app(initialize_searcher())

    # Run the Flask app
    app.run(debug=True, host='0.0.0.0', port=5001)
