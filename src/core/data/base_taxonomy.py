"""Built-in skill terms and categorization keywords."""

TECHNICAL_SKILLS = [
    # Programming Languages & Frameworks
    "JavaScript", "Python", "Java", "C++", "C#", "React", "Node.js", "SQL", "MongoDB", "PostgreSQL", "MySQL",
    "HTML", "CSS", "TypeScript", "Angular", "Vue.js", "PHP", "Ruby", "Go", "Rust", "Swift", "Kotlin",
    "Scala", "Perl", "R", "MATLAB", "SAS", "Julia", "Dart", "Flutter", "React Native", "Xamarin",

    # Cloud & Infrastructure
    "Kubernetes", "Docker", "AWS", "Azure", "Google Cloud", "Linux", "Git", "Jenkins", "Terraform",
    "Ansible", "Chef", "Puppet", "Vagrant", "VMware", "Hyper-V", "OpenStack", "CloudFormation",
    "Serverless", "Lambda", "Azure Functions", "Google Cloud Functions", "Microservices", "DevOps", "CI/CD",

    # Data & AI
    "Machine Learning", "Data Science", "Data Analysis", "Artificial Intelligence", "Deep Learning",
    "TensorFlow", "PyTorch", "Keras", "Scikit-learn", "Pandas", "NumPy", "Matplotlib", "Seaborn", "Jupyter",
    "Apache Spark", "Hadoop", "Kafka", "Elasticsearch", "Tableau", "Power BI", "Looker", "D3.js",
    "Data Visualization", "Natural Language Processing", "Computer Vision", "Neural Networks", "Big Data",
    "ETL", "Data Mining",

    # Industrial & Engineering
    "Industrial Automation", "PLC Programming", "SCADA", "HMI", "Process Control", "DCS", "MES",
    "Instrumentation", "Calibration", "Maintenance", "Troubleshooting", "Safety Systems", "SIL",
    "Pressure Transmitters", "Flow Measurement", "Temperature Sensors", "Level Measurement", "pH Sensors",
    "Control Valves", "Actuators", "VFDs", "Motor Control", "Power Systems", "Electrical Design",
    "Fieldbus", "HART Protocol", "Modbus", "Profibus", "Ethernet/IP", "Foundation Fieldbus", "DeviceNet",
    "Electrical Safety", "Explosion Proof", "Intrinsic Safety", "Loop Testing", "Signal Processing",

    # Web & Mobile Development
    "API Development", "REST", "GraphQL", "SOAP", "gRPC", "WebSocket", "Progressive Web Apps",
    "Single Page Applications", "Responsive Design", "Cross-browser Compatibility", "Web Performance",
    "SEO", "Accessibility", "WCAG", "Chrome DevTools", "Webpack", "Babel", "NPM", "Yarn", "ESLint",
    "Prettier", "Jest", "Cypress",

    # Security & Testing
    "Network Security", "Cybersecurity", "Penetration Testing", "Encryption", "PKI", "OAuth", "SAML",
    "Web Security", "Application Security", "Vulnerability Assessment", "Security Auditing", "GDPR", "HIPAA",
    "Testing", "Unit Testing", "Integration Testing", "Automation", "Selenium", "TestNG", "JUnit",
    "Load Testing", "Performance Testing", "Security Testing", "API Testing", "Mobile Testing",
]

FUNCTIONAL_SKILLS = [
    # Management & Leadership
    "Project Management", "Team Leadership", "Strategic Planning", "Business Analysis", "Product Management",
    "Requirements Gathering", "Stakeholder Management", "Change Management", "Risk Assessment",
    "Risk Management", "Process Improvement", "Quality Control", "Quality Assurance", "Customer Service",
    "Sales", "Marketing", "Digital Marketing", "Content Marketing", "Social Media Marketing",
    "Email Marketing", "SEO/SEM",

    # Business Operations
    "Human Resources", "Training Development", "Performance Management", "Recruitment",
    "Talent Acquisition", "Compensation Planning", "Employee Relations", "Organizational Development",
    "Succession Planning", "Financial Planning", "Budget Management", "Cost Analysis",
    "Revenue Optimization", "Financial Modeling", "Investment Analysis", "Accounting", "Bookkeeping",
    "Tax Preparation", "Auditing", "Compliance",

    # Operations & Supply Chain
    "Operations Management", "Supply Chain Management", "Logistics", "Inventory Management", "Procurement",
    "Vendor Management", "Contract Management", "Negotiation", "Lean Manufacturing", "Six Sigma",
    "Continuous Improvement", "Root Cause Analysis", "Quality Management", "ISO Standards", "Kaizen",
]

SOFT_SKILLS = [
    # Core Interpersonal Skills
    "Communication", "Verbal Communication", "Written Communication", "Nonverbal Communication",
    "Leadership", "Servant Leadership", "Transformational Leadership", "Situational Leadership",
    "Teamwork", "Collaboration", "Cross-functional Collaboration", "Remote Collaboration", "Team Building",

    # Cognitive Skills
    "Problem Solving", "Complex Problem Solving", "Analytical Problem Solving", "Creative Problem Solving",
    "Critical Thinking", "Systems Thinking", "Design Thinking", "Strategic Thinking", "Logical Reasoning",
    "Decision Making", "Data-driven Decision Making", "Ethical Decision Making", "Quick Decision Making",

    # Personal Effectiveness
    "Adaptability", "Flexibility", "Agility", "Resilience", "Stress Management",
    "Creativity", "Innovation", "Artistic Creativity", "Technical Creativity", "Strategic Creativity",
    "Time Management", "Priority Management", "Deadline Management", "Multi-tasking", "Task Organization",
    "Organization", "Planning", "Project Planning", "Resource Planning",

    # Professional Skills
    "Attention to Detail", "Quality Focus", "Accuracy", "Thoroughness", "Precision", "Reliability",
    "Accountability", "Responsibility", "Integrity", "Ethics", "Professionalism", "Work Ethic",
    "Initiative", "Self-Motivation", "Self-Direction", "Proactivity", "Goal Orientation", "Results Orientation",
]

# Abbreviations and common misspellings, keyed by lower-cased canonical term
KNOWN_VARIATIONS = {
    "javascript": ["js", "nodejs", "javascipt"],
    "node.js": ["nodejs", "node"],
    "python": ["py", "python3"],
    "typescript": ["ts"],
    "kubernetes": ["k8s", "kubernets"],
    "tensorflow": ["tf"],
    "pytorch": ["torch"],
    "machine learning": ["ml"],
    "artificial intelligence": ["ai"],
    "natural language processing": ["nlp"],
    "api development": ["api", "apis", "rest api", "web api"],
    "plc programming": ["plc", "programmable logic controller"],
    "scada": ["supervisory control and data acquisition"],
    "instrumentation": ["instruments"],
    "google cloud": ["gcp"],
    "amazon web services": ["aws"],
    "aws": ["amazon web services"],
    "ci/cd": ["continuous integration", "continuous delivery"],
    "sql": ["structured query language"],
    "communication": ["comunication", "communications skills"],
    "collaboration": ["colaboration"],
    "project management": ["project managment"],
    "troubleshooting": ["trouble shooting", "troubleshoot"],
    "calibration": ["callibration"],
}

TECHNICAL_KEYWORDS = [
    'programming', 'development', 'software', 'hardware', 'system', 'network', 'database', 'security',
    'automation', 'testing', 'api', 'cloud', 'devops', 'machine learning', 'ai', 'data', 'analytics',
    'web', 'mobile', 'javascript', 'python', 'java', 'sql', 'html', 'css', 'framework', 'library',
    'server', 'infrastructure', 'deployment', 'monitoring', 'logging', 'backup', 'recovery',
    'instrumentation', 'calibration', 'plc', 'scada', 'control', 'measurement', 'electrical',
]

FUNCTIONAL_KEYWORDS = [
    'management', 'planning', 'strategy', 'business', 'operations', 'finance', 'accounting', 'sales',
    'marketing', 'hr', 'recruitment', 'training', 'quality', 'compliance', 'audit', 'legal',
    'procurement', 'supply chain', 'logistics', 'research', 'development', 'product', 'project',
]

SOFT_KEYWORDS = [
    'communication', 'leadership', 'teamwork', 'collaboration', 'problem solving', 'thinking',
    'creativity', 'innovation', 'adaptability', 'flexibility', 'emotional', 'interpersonal',
    'social', 'presentation', 'speaking', 'listening', 'empathy', 'negotiation', 'conflict',
    'time management', 'organization', 'decision making', 'learning', 'cultural', 'diversity',
]

# Skill library "Skill Type" labels
SKILL_TYPE_LABELS = {
    "technical skill": "technical",
    "functional skill": "functional",
    "leadership skill": "soft",
    "soft skill": "soft",
}
