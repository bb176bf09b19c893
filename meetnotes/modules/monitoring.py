from prometheus_client import Counter, Histogram
from prometheus_fastapi_instrumentator import Instrumentator, metrics

PROMETHEUS_NAMESPACE = 'MeetNotes'
PROMETHEUS_SUMMARIES_SUBSYSTEM = 'Summaries'
PROMETHEUS_SHARE_SUBSYSTEM = 'Share'

SUMMARY_INPUT_LENGTH_METRIC = Histogram(
    'summary_input_length',
    documentation='Measures the length of the assembled prompt',
    namespace=PROMETHEUS_NAMESPACE,
    subsystem=PROMETHEUS_SUMMARIES_SUBSYSTEM,
    buckets=[50, 100, 500, 1000, 2000, 5000, 10000, 50000],
)

SUMMARY_DURATION_METRIC = Histogram(
    'summary_duration_seconds',
    documentation='Measures the duration of the generation API call in seconds',
    namespace=PROMETHEUS_NAMESPACE,
    subsystem=PROMETHEUS_SUMMARIES_SUBSYSTEM,
    buckets=[5**n for n in range(4)],
)

SUMMARY_FALLBACK_COUNTER = Counter(
    'summary_fallbacks',
    documentation='Number of upstream responses without usable text',
    namespace=PROMETHEUS_NAMESPACE,
    subsystem=PROMETHEUS_SUMMARIES_SUBSYSTEM,
)

SHARE_RECIPIENTS_METRIC = Histogram(
    'share_recipients',
    documentation='Number of recipients per shared summary',
    namespace=PROMETHEUS_NAMESPACE,
    subsystem=PROMETHEUS_SHARE_SUBSYSTEM,
    buckets=[1, 2, 5, 10, 25, 50],
)

SHARE_DURATION_METRIC = Histogram(
    'share_duration_seconds',
    documentation='Measures the duration of the mail submission in seconds',
    namespace=PROMETHEUS_NAMESPACE,
    subsystem=PROMETHEUS_SHARE_SUBSYSTEM,
    buckets=[0.5, 1, 2, 5, 10],
)

RELAY_ERROR_COUNTER = Counter(
    'relay_errors',
    documentation='Number of failed requests by operation and error kind',
    namespace=PROMETHEUS_NAMESPACE,
    labelnames=['operation', 'kind'],
)

instrumentator = Instrumentator(
    excluded_handlers=["/healthz", "/metrics"],
)

instrumentator.add(
    metrics.latency(buckets=[n for n in range(1, 6)]),
    metrics.requests(metric_namespace=PROMETHEUS_NAMESPACE, metric_subsystem=PROMETHEUS_SUMMARIES_SUBSYSTEM),
)
