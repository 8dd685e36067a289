"""
Positional search package.

This package provides the query evaluation stack:
- analyzers: Whitespace tokenizer and lowercase filter
- index: Immutable term -> document -> positions index
- index_format: Reader/writer for the text index format
- builder: Map/reduce index construction from document files
- stats: TF weighting, IDF and per-term statistics
- vectorizer: Document and query TF-IDF vectors
- phrase: Contiguous phrase matching over positions
- query_parser: Boolean query splitting and evaluation
- set_algebra: Boolean combinators over document sets
- ranker: Cosine similarity ranking
- engine: Query engine tying the pieces together
"""
