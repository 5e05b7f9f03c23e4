# Display labels for the charts and tables, keyed by language
LABELS = {
    "en": {
        "ui.title": "What would you like to know?",
        "ui.subtitle": "Ask me anything about your customer service call data and get instant insights",
        "ui.ask": "Ask Voxi...",
        "ui.analyzing": "Analyzing...",
        "ui.analyzingData": "Analyzing your customer service data...",
        "ui.whatCanHelp": "How else can I help you?",
        "ui.commonQuestions": "Try asking these questions:",
        "ui.detailedData": "Detailed Data",
        "ui.rawData": "Raw Data",
        "ui.error": "Something went wrong while fetching the analysis.",
        "charts.avgDuration": "Average Call Duration by Topic",
        "charts.callCount": "Call Count by Topic",
        "charts.sentiment": "Overall Sentiment Distribution",
        "charts.negativeRatio": "Negative Sentiment Ratio by Topic",
        "charts.peakHours": "Peak Call Hours",
        "charts.callDistribution": "24-Hour Call Distribution",
        "charts.callDistributionPercentage": "Call Distribution by Percentage",
        "charts.growthRate": "Topic Growth Rate",
        "charts.monthlyTrends": "Monthly Topic Growth Trends",
        "labels.duration": "Duration (seconds)",
        "labels.callCount": "Call Count",
        "labels.topic": "Topic",
        "labels.percentage": "Percentage",
        "labels.avgDuration": "Average Duration (s)",
        "labels.timeRange": "Time Range",
        "labels.growthRate": "Growth Rate",
        "labels.isGrowing": "Is Growing",
        "labels.positive": "Positive",
        "labels.neutral": "Neutral",
        "labels.negative": "Negative",
        "labels.total": "Total",
        "labels.negativeRatio": "Negative Ratio",
        "labels.currentFreq": "Current Frequency",
        "labels.frequency": "Frequency",
        "labels.currentCount": "Current Count",
        "labels.historicalAvg": "Historical Average Frequency",
        "labels.newTopic": "New Topic",
        "labels.month": "Month",
        "labels.hour": "Hour",
        "stats.peakMoment": "Peak Hour",
        "stats.totalCalls": "Total Calls",
        "stats.activeHours": "Active Hours Range",
        "stats.avgPerHour": "Average Calls per Hour",
        "stats.currentMonth": "Current Month",
        "stats.growingTopics": "Fast-Growing Topics",
        "stats.historicalMonths": "Historical Months",
    },
    "zh": {
        "ui.title": "您想了解什么？",
        "ui.subtitle": "询问任何关于客服通话数据的问题，即刻获得洞察",
        "ui.ask": "问问 Voxi...",
        "ui.analyzing": "分析中",
        "ui.analyzingData": "正在分析您的客服数据",
        "ui.whatCanHelp": "我还能帮您什么？",
        "ui.commonQuestions": "试试这些问题：",
        "ui.detailedData": "详细数据",
        "ui.rawData": "原始数据",
        "ui.error": "获取分析结果时出错。",
        "charts.avgDuration": "各话题平均通话时长",
        "charts.callCount": "各话题通话次数",
        "charts.sentiment": "整体情绪分布",
        "charts.negativeRatio": "各话题负面情绪占比",
        "charts.peakHours": "通话高峰时段",
        "charts.callDistribution": "24小时通话分布",
        "charts.callDistributionPercentage": "通话比例分布",
        "charts.growthRate": "话题增长率",
        "charts.monthlyTrends": "月度话题增长趋势",
        "labels.duration": "时长（秒）",
        "labels.callCount": "通话数量",
        "labels.topic": "话题",
        "labels.percentage": "比例",
        "labels.avgDuration": "平均时长（秒）",
        "labels.timeRange": "时间范围",
        "labels.growthRate": "增长率",
        "labels.isGrowing": "是否增长",
        "labels.positive": "正面",
        "labels.neutral": "中性",
        "labels.negative": "负面",
        "labels.total": "总计",
        "labels.negativeRatio": "负面情绪占比",
        "labels.currentFreq": "当前频率",
        "labels.frequency": "频率",
        "labels.currentCount": "当前数量",
        "labels.historicalAvg": "历史平均频率",
        "labels.newTopic": "新话题",
        "labels.month": "月份",
        "labels.hour": "小时",
        "stats.peakMoment": "尖峰时刻",
        "stats.totalCalls": "总通话数",
        "stats.activeHours": "每日活跃通话时间范围",
        "stats.avgPerHour": "平均每小时通话数",
        "stats.currentMonth": "当前月份",
        "stats.growingTopics": "快速增长话题数",
        "stats.historicalMonths": "历史记录分析月份数",
    },
}

def t(key: str, lang: str = "zh") -> str:
    """Look up a label, falling back to English and then to the key itself."""
    table = LABELS.get(lang, LABELS["en"])
    return table.get(key) or LABELS["en"].get(key, key)
