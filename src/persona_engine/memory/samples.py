"""Bundled sample transcripts for demos and smoke tests."""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Dict, List, Optional

from .parsers.plaintext import parse_transcript
from .schema import ChatMessage


@dataclass(frozen=True)
class SampleConversation:
    id: str
    name: str
    description: str
    transcript: str

    @cached_property
    def messages(self) -> List[ChatMessage]:
        return parse_transcript(self.transcript)

    def to_payload(self) -> Dict[str, object]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "messages": [m.to_payload() for m in self.messages],
        }


_ARJUN = """
User: I've been feeling so overwhelmed lately with all these project deadlines piling up at work.
AI: That sounds really stressful. Tell me more about what's been going on with your workload.
User: Well, I'm a software engineer at a mid-size tech startup, and we're launching a new product next month. I'm leading the backend development.
AI: Leading a major launch is a big responsibility. How are you managing your time?
User: Honestly, not great. I've been working until 9 PM most nights this week. I haven't had time for my usual morning runs or even to meal prep.
AI: It sounds like your self-care routines are taking a hit. How long have you been skipping your runs?
User: About two weeks now. I used to run every morning at 6 AM before work. It really helped me start the day with a clear mind.
AI: Morning runs seem important to you. What made you start that habit?
User: I started last year when I realized I was getting burned out. Running helps me think through problems and reduces my anxiety about deadlines.
AI: So running serves as both physical exercise and mental clarity for you. Have you noticed your anxiety increasing without it?
User: Definitely. I feel more on edge, and I'm getting frustrated with my team more easily. I snapped at my junior dev yesterday over something minor.
AI: That must have been difficult. How did you handle it afterward?
User: I apologized to him. I hate when I let stress make me act like that. I pride myself on being a supportive team lead.
AI: It's good that you recognized it and apologized. What does being a supportive leader mean to you?
User: It means being patient, giving constructive feedback, and making sure my team feels valued. My mentor when I was a junior dev was like that, and it made such a difference.
AI: Sounds like your mentor had a lasting impact on your values. What are your goals for your career?
User: I want to become a senior engineer within the next two years. Maybe even a tech lead eventually. But I don't want to sacrifice my health and personal life to get there.
AI: That's an important balance. What does your personal life look like outside of work?
User: Pretty minimal right now, honestly. I live alone in a small apartment downtown. I usually cook on Sundays - I love trying new recipes. And I have a few close friends from college I see occasionally.
AI: Cooking seems to be another creative outlet for you. What kind of recipes do you enjoy?
User: I'm really into trying different cuisines. Thai food, Italian pasta dishes, Indian curries. I like the precision of following recipes and then experimenting once I know the basics.
AI: That methodical approach sounds similar to how you might approach coding.
User: Ha, yeah! I never thought about it that way, but you're right. I like systems and understanding how things work before I innovate.
AI: Do you make time for cooking during busy work periods?
User: Not really. I've been ordering takeout way too much lately. It's expensive and not as satisfying. Plus, I waste my Sunday meal prep.
AI: It sounds like several of your important routines have been disrupted. What would help you get back on track?
User: I think I need to set better boundaries with work. I can't keep sacrificing everything for one project. My manager keeps praising my dedication, but I'm burning out.
AI: Setting boundaries can be challenging, especially when you're getting positive feedback. What's holding you back?
User: I guess I'm worried about disappointing people or seeming less committed. I grew up with parents who really valued hard work and achievement.
AI: Those values clearly shaped you. How do you think they'd view the idea of sustainable success versus burnout?
User: That's a good question. My dad actually had a heart attack a few years ago from work stress. He's okay now, but it scared me. I don't want to end up like that.
AI: That experience must have really impacted your perspective on work-life balance.
"""

_PRIYA = """
User: I finally finished that digital painting I've been working on for weeks, but now I'm too scared to post it online.
AI: Congratulations on finishing it! What's making you hesitant to share it?
User: I don't know, I guess I'm worried people won't like it or that it's not good enough. I've been doing digital art for three years now, and I still feel like an amateur.
AI: Three years is a significant amount of time. What kind of digital art do you create?
User: Mostly character illustrations and fantasy landscapes. I love creating these otherworldly scenes with dramatic lighting. I use Procreate on my iPad.
AI: What draws you to fantasy themes?
User: I've always loved escaping into fantasy worlds. I grew up reading tons of fantasy novels - Tolkien, Sanderson, Le Guin. Art feels like my way of creating those worlds myself.
AI: That's beautiful. So art is both a creative outlet and a form of escapism for you?
User: Yeah, exactly. When I'm drawing, especially late at night when everything's quiet, I feel completely absorbed. All my anxieties just fade away.
AI: You mentioned anxieties. What kinds of things make you anxious?
User: Social situations mostly. I work as a graphic designer at a small marketing agency, and I dread team meetings. I'm fine one-on-one, but groups make me really uncomfortable.
AI: Do you enjoy the graphic design work itself?
User: It pays the bills, but it's not very creative. Mostly making social media graphics and simple logos. I dream of doing art full-time, but that feels impossible.
AI: What would doing art full-time look like for you?
User: Maybe freelance illustration, concept art for games, or even selling prints. I follow so many artists on Instagram who make it work, and I'm so envious.
AI: You mentioned Instagram. Is that where you're thinking of posting your finished piece?
User: Yeah, I have an art account but I've only posted a few times. I see other artists getting thousands of likes and building communities, and I just... freeze up.
AI: What happens when you freeze up?
User: I start comparing myself to everyone else. Their art looks so polished and professional. Mine feels clunky. Then I convince myself no one will care about what I make.
AI: That self-doubt sounds really painful. Have you always struggled with comparing yourself to others?
User: Pretty much. I was never the 'talented' kid growing up. My older sister was a straight-A student and star athlete. I was just... there. Average at everything.
AI: How did that affect you?
User: I think it made me feel invisible. Art became this private thing where I didn't have to compete or be judged. But now I want to share it, and all those old feelings come back.
AI: Sharing your art would make you visible in a new way. That's vulnerable.
User: Exactly. But I also feel lonely in my art journey. I don't have any creative friends who understand this world. My roommate thinks art is just a hobby, not something serious.
AI: Finding community sounds important to you. Have you looked for other artists to connect with?
User: There are some Discord servers for artists, but again, social anxiety. I lurk but never really participate. It's exhausting.
AI: What would it take for you to feel comfortable participating?
User: I don't know. Maybe if I felt like my art was good enough to earn respect? Or if I could find just one or two people to connect with instead of a whole community.
AI: Small connections might feel more manageable than large groups.
User: Yeah. Actually, I do have this one online friend I met through a fantasy art challenge last year. We message sometimes about our projects. That feels safe.
AI: What makes that friendship feel safe?
User: We're at similar skill levels, and she's really encouraging without being fake about it. She gives honest feedback and shares her struggles too. It's refreshing.
AI: That sounds like a valuable connection. Does she post her art publicly?
User: Yeah, she does. And seeing her be brave about it makes me want to try too. I just need to get over this fear of judgment.
"""

SAMPLE_CONVERSATIONS: List[SampleConversation] = [
    SampleConversation(
        id="arjun-professional",
        name="Arjun - Software Engineer",
        description="Career-focused professional dealing with work stress and ambition",
        transcript=_ARJUN.strip(),
    ),
    SampleConversation(
        id="priya-creative",
        name="Priya - Digital Artist",
        description="Creative hobbyist dealing with self-doubt and artistic growth",
        transcript=_PRIYA.strip(),
    ),
]


def get_sample(sample_id: str) -> Optional[SampleConversation]:
    return next((s for s in SAMPLE_CONVERSATIONS if s.id == sample_id), None)
