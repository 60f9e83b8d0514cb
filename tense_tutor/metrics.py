from prometheus_client import Counter, Histogram

METRIC_PREFIX = 'tense_tutor_'

ANALYSIS_METRICS = {
    'analyses': Counter(
        METRIC_PREFIX + 'analysis_total',
        'Total number of full sentence analyses served',
        labelnames=['tense_type'],
    ),
    'invalid_analyses': Counter(
        METRIC_PREFIX + 'analysis_invalid_total',
        'Total number of analyses that found errors or missing roles',
        labelnames=['tense_type'],
    ),
    'quick_classifications': Counter(
        METRIC_PREFIX + 'quick_classification_total',
        'Total number of quick role/tense classifications served',
        labelnames=['tense_type'],
    ),
    'analysis_time': Histogram(
        METRIC_PREFIX + 'analysis_time_seconds',
        'Time spent analysing a sentence',
        labelnames=['operation'],
        buckets=(0.0005, 0.001, 0.0025, 0.005, 0.01, 0.025, 0.05, 0.1),
    ),
}

SPELLING_METRICS = {
    'checks': Counter(
        METRIC_PREFIX + 'spell_check_total',
        'Total number of spelling checks',
        labelnames=['lang'],
    ),
    'problems': Counter(
        METRIC_PREFIX + 'spell_problem_total',
        'Total number of spelling, grammar and semantic problems found',
        labelnames=['kind'],
    ),
}

CLIENT_METRICS = {
    'remote_failures': Counter(
        METRIC_PREFIX + 'client_remote_failure_total',
        'Total number of failed calls to the analysis service',
        labelnames=['operation', 'kind'],
    ),
    'fallbacks': Counter(
        METRIC_PREFIX + 'client_local_fallback_total',
        'Total number of analyses recomputed locally after a remote failure',
    ),
    'stale_responses': Counter(
        METRIC_PREFIX + 'client_stale_response_total',
        'Total number of responses discarded because newer input exists',
        labelnames=['operation'],
    ),
}
