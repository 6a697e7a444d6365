"""
Deterministic seed data loaded into every fresh registry (unless disabled with
SEED_FIXTURES=0). Ids are plain strings so they never collide with the
prefixed ids the stores hand out.
"""
from __future__ import annotations

from datetime import date, datetime

from app.connect.modules.events.models import Event, EventAttendee
from app.connect.modules.feedback.models import Feedback
from app.connect.modules.leadership.models import Leader, LeaderContact
from app.connect.modules.members.models import ContactInfo, Member
from app.connect.modules.notices.models import Notice
from app.connect.modules.photos.models import EventPhoto
from app.connect.modules.reports.models import Report


def _dt(s: str) -> datetime:
    return datetime.fromisoformat(s.rstrip("Z"))


def members() -> list[Member]:
    return [
        Member(
            id="1",
            full_name="राजेश कुमार शर्मा",
            phone="+91 9876543210",
            constituency="मुंबई दक्षिण",
            district="मुंबई",
            division="मुंबई महानगर",
            designation="विभाग अध्यक्ष",
            achievements="15 वर्षों का अनुभव, 1000+ सदस्य जुटाए",
            social_media_handles={
                "whatsapp": "+91 9876543210",
                "facebook": "rajesh.sharma",
                "twitter": "@rajesh_sharma",
            },
            is_verified=True,
            membership_date=date(2010, 3, 15),
            profile_image="/images/members/rajesh-sharma.jpg",
            contact_info=ContactInfo(
                email="rajesh.sharma@bjp.org",
                address="मुंबई दक्षिण, महाराष्ट्र",
                emergency_contact="+91 9876543211",
            ),
        ),
        Member(
            id="2",
            full_name="प्रिया पाटिल",
            phone="+91 8765432109",
            constituency="पुणे शहर",
            district="पुणे",
            division="पुणे",
            designation="महिला मोर्चा अध्यक्ष",
            achievements="महिला सशक्तिकरण कार्यक्रमों में अग्रणी",
            social_media_handles={"whatsapp": "+91 8765432109", "instagram": "priya.patil"},
            is_verified=True,
            membership_date=date(2015, 7, 22),
            profile_image="/images/members/priya-patil.jpg",
            contact_info=ContactInfo(
                email="priya.patil@bjp.org",
                address="पुणे शहर, महाराष्ट्र",
                emergency_contact="+91 8765432110",
            ),
        ),
    ]


def events() -> list[Event]:
    return [
        Event(
            id="1",
            title="महाराष्ट्र BJP कार्यकर्ता सम्मेलन",
            description="महाराष्ट्र के सभी कार्यकर्ताओं के लिए वार्षिक सम्मेलन",
            event_type="hybrid",
            venue="मुंबई, महाराष्ट्र",
            event_date=_dt("2024-02-15T10:00:00"),
            end_date=_dt("2024-02-15T18:00:00"),
            max_attendees=5000,
            current_attendees=3200,
            meeting_link="https://meet.google.com/abc-defg-hij",
            organizer="महाराष्ट्र BJP",
            constituency="सभी",
            district="सभी",
            status="published",
            category="सम्मेलन",
            image_url="/images/events/worker-conference.jpg",
            attendees=[
                EventAttendee(
                    id="1",
                    member_id="1",
                    member_name="राजेश कुमार शर्मा",
                    status="confirmed",
                    registered_at=_dt("2024-01-20T09:00:00"),
                )
            ],
        ),
        Event(
            id="2",
            title="युवा मोर्चा डिजिटल कैंपेन",
            description="सोशल मीडिया पर BJP के संदेश को फैलाने के लिए युवा कार्यकर्ताओं का प्रशिक्षण",
            event_type="online",
            venue="ऑनलाइन",
            event_date=_dt("2024-02-20T14:00:00"),
            end_date=_dt("2024-02-20T16:00:00"),
            max_attendees=1000,
            current_attendees=750,
            meeting_link="https://zoom.us/j/123456789",
            organizer="युवा मोर्चा",
            constituency="सभी",
            district="सभी",
            status="published",
            category="डिजिटल कैंपेन",
        ),
    ]


def notices() -> list[Notice]:
    return [
        Notice(
            id="1",
            title="महत्वपूर्ण: लोकसभा चुनाव तैयारी बैठक",
            content="सभी जिला अध्यक्षों को लोकसभा चुनाव की तैयारी के लिए आवश्यक बैठक में उपस्थित होना अनिवार्य है।",
            priority="urgent",
            category="चुनाव",
            author="महाराष्ट्र BJP अध्यक्ष",
            target_audience="leadership",
            constituency="सभी",
            district="सभी",
            expiry_date=_dt("2024-02-10T23:59:59"),
            attachments=["/documents/election-preparation.pdf"],
            is_pinned=True,
            created_at=_dt("2024-01-25T10:00:00"),
            read_by=["1", "2"],
            view_count=2,
        ),
        Notice(
            id="2",
            title="कार्यकर्ता प्रशिक्षण कार्यक्रम",
            content="नए कार्यकर्ताओं के लिए प्रशिक्षण कार्यक्रम का आयोजन किया जा रहा है।",
            priority="high",
            category="प्रशिक्षण",
            author="संगठन सचिव",
            target_audience="all",
            constituency="सभी",
            district="सभी",
            expiry_date=_dt("2024-03-01T23:59:59"),
            attachments=[],
            is_pinned=False,
            created_at=_dt("2024-01-26T14:30:00"),
            read_by=["1"],
            view_count=1,
        ),
    ]


def feedback() -> list[Feedback]:
    return [
        Feedback(
            id="1",
            member_id="1",
            member_name="राजेश कुमार शर्मा",
            subject="कार्यकर्ता प्रशिक्षण के लिए सुझाव",
            message="नए कार्यकर्ताओं के लिए और अधिक प्रशिक्षण कार्यक्रम आयोजित किए जाने चाहिए।",
            category="suggestion",
            status="pending",
            priority="medium",
            user_type="member",
            phone="+91 9876543210",
            email="rajesh.sharma@bjp.org",
            constituency="मुंबई दक्षिण",
            district="मुंबई",
            created_at=_dt("2024-01-25T10:30:00"),
        ),
        Feedback(
            id="2",
            member_id="2",
            member_name="प्रिया पाटिल",
            subject="तकनीकी समस्या - वेबसाइट लॉगिन नहीं हो रहा",
            message="मैं पिछले दो दिनों से वेबसाइट में लॉगिन नहीं कर पा रही हूं। कृपया इस समस्या का समाधान करें।",
            category="technical_issue",
            status="in_progress",
            priority="high",
            user_type="member",
            phone="+91 8765432109",
            email="priya.patil@bjp.org",
            constituency="पुणे शहर",
            district="पुणे",
            created_at=_dt("2024-01-26T14:15:00"),
            response="आपकी समस्या को तकनीकी टीम को भेज दिया गया है। 24 घंटे में समाधान मिल जाएगा।",
            response_date=_dt("2024-01-26T16:30:00"),
        ),
        Feedback(
            id="3",
            member_id="3",
            member_name="अमित वर्मा",
            subject="कार्यकर्ता सम्मेलन की फीडबैक",
            message="हाल ही में आयोजित कार्यकर्ता सम्मेलन बहुत अच्छा था। व्यवस्था उत्कृष्ट थी और सभी कार्यक्रम समय पर हुए।",
            category="event_feedback",
            status="resolved",
            priority="low",
            user_type="member",
            event_id="1",
            phone="+91 9123456789",
            constituency="नागपुर पूर्व",
            district="नागपुर",
            created_at=_dt("2024-01-27T09:45:00"),
            response="आपकी सकारात्मक फीडबैक के लिए धन्यवाद। हम भविष्य में भी ऐसे कार्यक्रम आयोजित करते रहेंगे।",
            response_date=_dt("2024-01-27T11:00:00"),
        ),
        Feedback(
            id="4",
            member_id="4",
            member_name="डॉ. सुनीता देशमुख",
            subject="जिला अध्यक्ष के साथ बैठक का अनुरोध",
            message="मैं अपने क्षेत्र में महिला कार्यकर्ताओं की समस्याओं पर चर्चा करने के लिए जिला अध्यक्ष जी से मिलना चाहती हूं।",
            category="meeting_request",
            status="pending",
            priority="medium",
            user_type="leader",
            phone="+91 9876512345",
            email="sunita.deshmukh@bjp.org",
            constituency="औरंगाबाद मध्य",
            district="औरंगाबाद",
            created_at=_dt("2024-01-27T16:20:00"),
        ),
        Feedback(
            id="5",
            member_id="5",
            member_name="विकास जोशी",
            subject="युवा मोर्चा कार्यक्रम में अव्यवस्था",
            message="कल के युवा मोर्चा कार्यक्रम में बहुत अव्यवस्था थी। समय पर शुरू नहीं हुआ और ध्वनि व्यवस्था भी खराब थी।",
            category="complaint",
            status="pending",
            priority="urgent",
            user_type="member",
            event_id="2",
            phone="+91 8765123456",
            constituency="ठाणे पूर्व",
            district="ठाणे",
            created_at=_dt("2024-01-28T08:30:00"),
        ),
    ]


def photos() -> list[EventPhoto]:
    return [
        EventPhoto(
            id="1",
            event_id="1",
            event_name="महाराष्ट्र BJP कार्यकर्ता सम्मेलन",
            photo_url="/images/events/worker-conference-1.jpg",
            uploaded_by="राजेश कुमार शर्मा",
            uploaded_at=_dt("2024-01-26T18:30:00"),
            description="कार्यकर्ता सम्मेलन का मुख्य सत्र",
            tags=["सम्मेलन", "कार्यकर्ता", "मुंबई"],
        )
    ]


# (id, title, description, category, type, author, department, created_at,
#  file_size, download_count, is_public, tags, file_name)
_REPORT_ROWS = [
    ("1", "महाराष्ट्र BJP मासिक गतिविधी अहवाल - जुलै 2025",
     "जुलै महिन्यातील सर्व पक्षीय गतिविधी, सदस्यत्व वाढ, आणि कार्यक्रमांचा तपशीलवार अहवाल",
     "monthly", "pdf", "संगठन विभाग", "संगठन", "2025-07-28T10:00:00Z", "2.4 MB", 156, True,
     ["गतिविधी", "मासिक", "सदस्यत्व"], "monthly_activity_report_july_2025.pdf"),
    ("2", "त्रैमासिक वित्तीय अहवाल Q2 2025",
     "दुसऱ्या तिमाहीतील आर्थिक व्यवहार, खर्च विश्लेषण आणि बजेट अंमलबजावणी",
     "quarterly", "excel", "वित्त विभाग", "वित्त", "2025-07-25T15:30:00Z", "1.8 MB", 89, False,
     ["वित्त", "त्रैमासिक", "बजेट"], "quarterly_financial_report_q2_2025.xlsx"),
    ("3", "कार्यकर्ता सम्मेलन 2025 - कार्यक्रम अहवाल",
     "राज्यव्यापी कार्यकर्ता सम्मेलनाचा संपूर्ण अहवाल, सहभागी संख्या आणि फीडबॅक",
     "event", "pdf", "कार्यक्रम समिती", "कार्यक्रम", "2025-07-20T09:15:00Z", "3.1 MB", 234, True,
     ["कार्यक्रम", "सम्मेलन", "कार्यकर्ता"], "worker_conference_2025_report.pdf"),
    ("4", "वार्षिक कामगिरी अहवाल 2024-25",
     "गेल्या वर्षभराची संपूर्ण कामगिरी, उपलब्धी आणि भविष्याची योजना",
     "annual", "pdf", "मुख्य कार्यकारी अधिकारी", "प्रशासन", "2025-07-15T14:20:00Z", "5.2 MB", 312, True,
     ["वार्षिक", "कामगिरी", "उपलब्धी"], "annual_performance_report_2024_25.pdf"),
    ("5", "डिजिटल अभियान मॅट्रिक्स अहवाल",
     "सोशल मीडिया पोहोच, ऑनलाइन सहभाग आणि डिजिटल कॅम्पेनची प्रभावशीलता",
     "performance", "excel", "डिजिटल टीम", "माध्यम", "2025-07-22T11:45:00Z", "1.2 MB", 67, False,
     ["डिजिटल", "सोशल मीडिया", "मॅट्रिक्स"], "digital_campaign_metrics_july_2025.xlsx"),
    ("6", "मतदारसंघ-निहाय सदस्यत्व विश्लेषण",
     "सर्व 288 मतदारसंघांमधील सदस्यत्वाची संख्या, वाढीचा दर आणि लक्ष्य गाठण्याचे विश्लेषण",
     "monthly", "pdf", "सदस्यत्व विभाग", "संगठन", "2025-07-18T16:10:00Z", "2.8 MB", 145, True,
     ["सदस्यत्व", "मतदारसंघ", "विश्लेषण"], "constituency_membership_analysis_july_2025.pdf"),
    ("7", "युवा मोर्चा गतिविधी अहवाल",
     "युवा मोर्चाच्या सर्व कार्यक्रम, नवीन सदस्यत्व आणि युवा सहभागाचा अहवाल",
     "monthly", "word", "युवा मोर्चा", "संगठन", "2025-07-12T13:25:00Z", "950 KB", 78, True,
     ["युवा", "मोर्चा", "गतिविधी"], "youth_wing_activity_report_july_2025.docx"),
    ("8", "प्रशिक्षण कार्यक्रम मूल्यांकन 2025",
     "वर्षभरातील सर्व प्रशिक्षण कार्यक्रमांचे मूल्यांकन, परिणामकारकता आणि सुधारणा सूचना",
     "annual", "pdf", "प्रशिक्षण विभाग", "कार्यक्रम", "2025-07-08T10:30:00Z", "4.1 MB", 198, False,
     ["प्रशिक्षण", "मूल्यांकन", "कार्यक्रम"], "training_program_evaluation_2025.pdf"),
    ("9", "महिला मोर्चा सशक्तिकरण अभियान अहवाल",
     "महिला सशक्तिकरण अभियानाचे परिणाम, लाभार्थी आणि सामाजिक प्रभाव विश्लेषण",
     "event", "pdf", "महिला मोर्चा", "सामाजिक", "2025-07-05T14:45:00Z", "2.6 MB", 167, True,
     ["महिला", "सशक्तिकरण", "अभियान"], "women_empowerment_campaign_report_2025.pdf"),
    ("10", "खर्च नियंत्रण आणि ऑडिट अहवाल",
     "वित्तीय खर्चाचे नियंत्रण, आंतरिक ऑडिट निष्कर्ष आणि सुधारणा शिफारशी",
     "financial", "excel", "ऑडिट टीम", "वित्त", "2025-07-02T09:20:00Z", "1.5 MB", 45, False,
     ["ऑडिट", "खर्च", "नियंत्रण"], "expense_control_audit_report_2025.xlsx"),
]


def reports() -> list[Report]:
    return [
        Report(
            id=rid,
            title=title,
            description=description,
            category=category,
            type=kind,
            author=author,
            department=department,
            created_at=_dt(created_at),
            file_size=file_size,
            download_count=downloads,
            is_public=is_public,
            tags=list(tags),
            file_name=file_name,
        )
        for (rid, title, description, category, kind, author, department, created_at,
             file_size, downloads, is_public, tags, file_name) in _REPORT_ROWS
    ]


def leadership() -> list[Leader]:
    return [
        Leader(
            id="1",
            name="नरेंद्र मोदी",
            position="प्रधानमंत्री, भारत",
            constituency="वाराणसी",
            district="वाराणसी",
            bio="भारत के 14वें प्रधानमंत्री, भारतीय जनता पार्टी के राष्ट्रीय अध्यक्ष",
            achievements=[
                "2014 और 2019 में लोकसभा चुनाव में ऐतिहासिक जीत",
                "मेक इन इंडिया, डिजिटल इंडिया जैसे महत्वपूर्ण अभियान",
                "विश्व स्तर पर भारत की छवि को मजबूत किया",
            ],
            social_media_handles={
                "whatsapp": "+91 9876543210",
                "facebook": "narendramodi",
                "twitter": "@narendramodi",
                "instagram": "narendramodi",
                "youtube": "narendramodi",
            },
            contact_info=LeaderContact(
                email="pm@narendramodi.in",
                phone="+91 9876543210",
                office_address="7, लोक कल्याण मार्ग, नई दिल्ली",
            ),
            profile_image="https://upload.wikimedia.org/wikipedia/commons/c/c4/Official_Photograph_of_Prime_Minister_Narendra_Modi_Portrait.png",
            display_order=1,
        ),
        Leader(
            id="2",
            name="देवेंद्र फडणवीस",
            position="महाराष्ट्र के उपमुख्यमंत्री",
            constituency="नागपुर दक्षिण-पश्चिम",
            district="नागपुर",
            bio="महाराष्ट्र के पूर्व मुख्यमंत्री, वर्तमान में उपमुख्यमंत्री",
            achievements=[
                "महाराष्ट्र के मुख्यमंत्री रहे",
                "नागपुर महानगर के विकास में महत्वपूर्ण योगदान",
                "किसान कल्याण के लिए कई योजनाएं शुरू की",
            ],
            social_media_handles={
                "whatsapp": "+91 8765432109",
                "facebook": "devendrafadnavis",
                "twitter": "@Dev_Fadnavis",
                "instagram": "devendrafadnavis",
            },
            contact_info=LeaderContact(
                email="devendra.fadnavis@maharashtra.gov.in",
                phone="+91 8765432109",
                office_address="मंत्रालय, मुंबई, महाराष्ट्र",
            ),
            profile_image="https://upload.wikimedia.org/wikipedia/commons/thumb/8/8c/Devendra_Fadnavis_%28cropped%29.jpg/800px-Devendra_Fadnavis_%28cropped%29.jpg",
            display_order=2,
        ),
        Leader(
            id="3",
            name="अमित शाह",
            position="गृह मंत्री, भारत",
            constituency="गांधीनगर",
            district="गांधीनगर",
            bio="भारत के गृह मंत्री और भारतीय जनता पार्टी के राष्ट्रीय अध्यक्ष",
            achievements=[
                "2014 से 2019 तक भारतीय जनता पार्टी के राष्ट्रीय अध्यक्ष",
                "2019 में ऐतिहासिक लोकसभा चुनाव जीत",
                "गृह मंत्रालय में कई महत्वपूर्ण सुधार",
            ],
            social_media_handles={
                "whatsapp": "+91 9876543211",
                "facebook": "amitshahofficial",
                "twitter": "@AmitShah",
                "instagram": "amitshahofficial",
            },
            contact_info=LeaderContact(
                email="amit.shah@mha.gov.in",
                phone="+91 9876543211",
                office_address="गृह मंत्रालय, नई दिल्ली",
            ),
            profile_image="https://upload.wikimedia.org/wikipedia/commons/thumb/5/5a/Amit_Shah_%28cropped%29.jpg/800px-Amit_Shah_%28cropped%29.jpg",
            display_order=3,
        ),
        Leader(
            id="4",
            name="राजनाथ सिंह",
            position="रक्षा मंत्री, भारत",
            constituency="लखनऊ",
            district="लखनऊ",
            bio="भारत के रक्षा मंत्री और भारतीय जनता पार्टी के वरिष्ठ नेता",
            achievements=[
                "उत्तर प्रदेश के मुख्यमंत्री रहे",
                "केंद्रीय गृह मंत्री के रूप में कार्य",
                "रक्षा मंत्रालय में आत्मनिर्भर भारत अभियान",
            ],
            social_media_handles={
                "whatsapp": "+91 9876543212",
                "facebook": "rajanathsingh",
                "twitter": "@rajnathsingh",
                "instagram": "rajanathsingh",
            },
            contact_info=LeaderContact(
                email="rajanath.singh@mod.gov.in",
                phone="+91 9876543212",
                office_address="रक्षा मंत्रालय, नई दिल्ली",
            ),
            profile_image="https://upload.wikimedia.org/wikipedia/commons/thumb/8/8c/Rajnath_Singh_%28cropped%29.jpg/800px-Rajnath_Singh_%28cropped%29.jpg",
            display_order=4,
        ),
    ]
