app_title = 'AI Meeting Notes Summarizer'
health_message = f'Backend Running - {app_title}'

# summaries
default_instruction = 'Summarize this meeting:'
transcript_separator = '\n\nTranscript:\n'
no_summary_fallback = 'No summary generated.'
upstream_failed_message = 'Upstream API failed'

# share
share_subject = 'Meeting Summary'
share_success_message = 'Summary sent successfully!'
