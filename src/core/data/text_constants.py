"""Word lists used when summarizing and classifying documents."""

STOP_WORDS = {
    'the', 'and', 'or', 'but', 'in', 'on', 'at', 'to', 'for', 'of', 'with',
    'by', 'from', 'up', 'about', 'into', 'through', 'during', 'before',
    'after', 'above', 'below', 'between', 'among', 'this', 'that', 'these',
    'those', 'is', 'are', 'was', 'were', 'be', 'been', 'being', 'have',
    'has', 'had', 'do', 'does', 'did', 'will', 'would', 'could', 'should',
    'may', 'might', 'must', 'can', 'shall', 'his', 'her', 'its', 'their',
    'our', 'your', 'you', 'we', 'they', 'he', 'she', 'it', 'him', 'them',
    'us', 'me', 'my', 'mine', 'yours', 'hers', 'ours', 'theirs',
    'also', 'more', 'most', 'some', 'any', 'all', 'each', 'every', 'both',
    'either', 'neither', 'other', 'another', 'such', 'same', 'different',
    'than', 'then', 'there', 'here', 'when', 'where', 'which', 'while', 'what',
    'will', 'with', 'within', 'without', 'over', 'under', 'very', 'just',
}

DATA_INDICATORS = ['data', 'analytics', 'analysis']
PROCESS_INDICATORS = ['process', 'control', 'automation']
MANAGEMENT_INDICATORS = ['management', 'leadership']

TECHNOLOGY_DOMAIN = "Technology & Software Development"
DATA_DOMAIN = "Data Science & Analytics"
PROCESS_DOMAIN = "Process Industries & Automation"
MANAGEMENT_DOMAIN = "Management & Leadership"
DEFAULT_DOMAIN = "General Professional Skills"
