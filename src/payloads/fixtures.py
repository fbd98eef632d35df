"""Hard-coded sample payloads used to preview each workflow without a live agent call."""

from src.payloads.models import AnalyticsPayload, ContentPayload, HashtagPayload, SchedulePayload

SAMPLE_CONTENT = ContentPayload.from_result(
    {
        "post_content": (
            "Building a startup is like running a marathon in the dark -- you can't see the finish line, "
            "but every step forward counts.\n\n"
            "Here are 3 lessons I learned scaling from 0 to 10k users:\n\n"
            "1. Ship fast, iterate faster. Your first version will be embarrassing, and that's okay.\n"
            "2. Talk to users daily. The best product insights come from real conversations.\n"
            "3. Focus on retention before growth. A leaky bucket never fills up.\n\n"
            "The founder journey isn't glamorous, but it's the most rewarding thing I've ever done."
        ),
        "platform": "LinkedIn",
        "content_format": "Short Post",
        "hook_line": "Building a startup is like running a marathon in the dark",
        "call_to_action": "What's the biggest lesson you've learned as a founder? Drop it in the comments below.",
        "suggested_posting_time": "Tuesday 8:30 AM EST",
        "carousel_slides": [],
        "tone_notes": (
            "Conversational, authentic, slightly vulnerable. "
            "Balances personal experience with actionable advice."
        ),
        "content_tips": (
            "Consider adding a personal photo or behind-the-scenes image to increase engagement. "
            "LinkedIn posts with images get 2x more engagement."
        ),
    }
)

SAMPLE_HASHTAGS = HashtagPayload.from_result(
    {
        "platform": "LinkedIn",
        "hashtags": [
            {"tag": "#StartupLife", "category": "High Volume", "estimated_reach": "2.4M"},
            {"tag": "#FounderJourney", "category": "Medium", "estimated_reach": "890K"},
            {"tag": "#BuildInPublic", "category": "Trending", "estimated_reach": "1.2M"},
            {"tag": "#SaaS", "category": "High Volume", "estimated_reach": "3.1M"},
            {"tag": "#Entrepreneurship", "category": "High Volume", "estimated_reach": "5.6M"},
            {"tag": "#StartupGrowth", "category": "Niche", "estimated_reach": "340K"},
            {"tag": "#ProductLed", "category": "Niche", "estimated_reach": "180K"},
            {"tag": "#TechFounder", "category": "Medium", "estimated_reach": "520K"},
        ],
        "hashtag_groups": [
            {"group_name": "Growth & Scaling", "tags": ["#StartupGrowth", "#ScaleUp", "#GrowthHacking"]},
            {"group_name": "Founder Community", "tags": ["#FounderJourney", "#BuildInPublic", "#IndieHacker"]},
            {"group_name": "Industry", "tags": ["#SaaS", "#TechStartup", "#B2B"]},
        ],
        "strategy_notes": (
            "For LinkedIn, use 3-5 hashtags maximum. Place them at the end of your post, not inline. "
            "Mix high-volume tags with niche ones for optimal reach without getting lost in the noise."
        ),
        "trending_tags": ["#BuildInPublic", "#AIStartup", "#FounderMindset"],
    }
)

SAMPLE_SCHEDULE = SchedulePayload.from_result(
    {
        "schedule": [
            {"day": "Monday", "time": "8:30 AM", "platform": "LinkedIn", "content_type": "Thought Leadership",
             "priority": "High", "reasoning": "Monday mornings have peak professional engagement"},
            {"day": "Tuesday", "time": "12:00 PM", "platform": "Instagram", "content_type": "Behind-the-Scenes",
             "priority": "Medium", "reasoning": "Lunch break scrolling peaks on Tuesdays"},
            {"day": "Wednesday", "time": "9:00 AM", "platform": "LinkedIn", "content_type": "Case Study",
             "priority": "High", "reasoning": "Mid-week is ideal for detailed content"},
            {"day": "Thursday", "time": "5:00 PM", "platform": "Instagram", "content_type": "Carousel",
             "priority": "High", "reasoning": "Evening engagement spike for visual content"},
            {"day": "Friday", "time": "10:00 AM", "platform": "LinkedIn", "content_type": "Personal Story",
             "priority": "Medium", "reasoning": "Friday personal posts get high engagement"},
        ],
        "weekly_summary": (
            "This schedule targets 5 posts per week across both platforms, with LinkedIn focused on "
            "professional thought leadership and Instagram on visual storytelling. The timing is optimized "
            "for maximum engagement based on platform-specific peak hours."
        ),
        "platform_frequency": {"instagram": 2, "linkedin": 3},
        "optimization_tips": (
            "Consistency is more important than frequency. Start with this 5-post schedule and adjust based "
            "on engagement data after 2-3 weeks. Always batch-create content on weekends to maintain the schedule."
        ),
        "best_posting_windows": [
            {"platform": "LinkedIn", "day": "Weekdays", "time_window": "7:30-9:30 AM", "engagement_level": "Peak"},
            {"platform": "LinkedIn", "day": "Weekdays", "time_window": "12:00-1:00 PM", "engagement_level": "High"},
            {"platform": "Instagram", "day": "Tue-Thu", "time_window": "11:00 AM-1:00 PM", "engagement_level": "Peak"},
            {"platform": "Instagram", "day": "Daily", "time_window": "7:00-9:00 PM", "engagement_level": "High"},
        ],
    }
)

SAMPLE_ANALYTICS = AnalyticsPayload.from_result(
    {
        "performance_summary": (
            "Your content performance over the past 30 days shows strong growth on LinkedIn (+23% engagement) "
            "with room for improvement on Instagram. Carousel posts are your top-performing format, while "
            "personal stories drive the most comments. Consider increasing posting frequency on Instagram "
            "from 2 to 3 times per week."
        ),
        "top_performing_content": [
            {"content_type": "Carousel", "platform": "Instagram", "engagement_rate": "8.4%",
             "key_factors": "Educational content, swipe-worthy design, strong CTA on last slide"},
            {"content_type": "Personal Story", "platform": "LinkedIn", "engagement_rate": "6.2%",
             "key_factors": "Authenticity, vulnerability, relatable founder experience"},
            {"content_type": "Thought Leadership", "platform": "LinkedIn", "engagement_rate": "5.1%",
             "key_factors": "Industry insights, data-driven claims, contrarian viewpoint"},
        ],
        "recommendations": [
            {"area": "Content Mix",
             "recommendation": "Increase carousel posts on Instagram to 2x per week. "
                               "They consistently outperform single images by 3x.",
             "expected_impact": "+35% engagement", "priority": "High"},
            {"area": "Posting Time",
             "recommendation": "Shift LinkedIn posts 30 minutes earlier. "
                               "Your audience is most active at 7:30-8:00 AM, not 8:30 AM.",
             "expected_impact": "+15% reach", "priority": "Medium"},
            {"area": "Hashtag Strategy",
             "recommendation": "Reduce hashtag count on LinkedIn from 8 to 3-4. "
                               "Over-hashtagging reduces perceived professionalism.",
             "expected_impact": "+10% engagement", "priority": "Low"},
        ],
        "trend_analysis": (
            "Short-form video content is gaining traction on both platforms. Founders sharing raw, unpolished "
            "behind-the-scenes content are seeing 2-3x higher engagement than polished corporate content. "
            "Consider adding Instagram Reels to your content mix."
        ),
        "growth_opportunities": [
            'Start a weekly "Founder Friday" series sharing personal lessons',
            "Collaborate with 2-3 other founders for cross-promotion",
            "Repurpose top LinkedIn posts into Instagram carousels",
            "Add Instagram Reels for behind-the-scenes content",
            "Build an email list from your most engaged followers",
        ],
        "metrics_breakdown": {
            "instagram": {"followers": "2,340", "engagement_rate": "4.2%", "avg_likes": 156,
                          "avg_comments": 23, "reach_growth": "+12%"},
            "linkedin": {"followers": "8,920", "engagement_rate": "5.8%", "avg_likes": 312,
                         "avg_comments": 47, "reach_growth": "+23%"},
        },
    }
)

# Form values seeded alongside each fixture
SAMPLE_CONTENT_FORM = {
    "topic": "Lessons learned scaling a startup from 0 to 10k users",
    "platform": "linkedin",
    "format": "short_post",
}
SAMPLE_HASHTAG_FORM = {
    "content": "Building a startup is like running a marathon in the dark...",
}
SAMPLE_SCHEDULE_FORM = {
    "description": "B2B SaaS startup, targeting founders and early-stage investors",
}
SAMPLE_ANALYTICS_FORM = {
    "metrics": (
        "Instagram: 2340 followers, 4.2% engagement rate, avg 156 likes, 23 comments. "
        "LinkedIn: 8920 followers, 5.8% engagement, avg 312 likes, 47 comments. Posting 5x/week."
    ),
}
