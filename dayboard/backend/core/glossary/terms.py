"""
IT Terminology Glossary.

Static, read-only list of (id, label) pairs shown on the terms page and in
the daily-terms widget.
"""

from __future__ import annotations

TERMS: tuple[tuple[str, str], ...] = (
    ("1", "e - 마켓 플레이스"),
    ("2", "드랍쉬핑 (Dropshipping)"),
    ("3", "AI 파일"),
    ("4", "O2O (online to offline)"),
    ("5", "고객 구매 여정 (Consumer Decision Journey)"),
    ("6", "NCP (Network Control Protocol)"),
    ("7", "스핀오프 (Spinoff)"),
    ("8", "킬러 콘텐츠 (Killer Contents)"),
    ("9", "라이브러리"),
    ("10", "목업"),
    ("11", "정보구조도 (IA)"),
    ("12", "API 문서"),
    ("13", "데이터 전처리 (Data Preprocessing)"),
    ("14", "J커브(J-curve effect)"),
    ("15", "메타포"),
    ("16", "모달"),
    ("17", "패딩"),
    ("18", "제플린"),
    ("19", "와이어프레임"),
    ("20", "마진"),
    ("21", "프리 머니"),
    ("22", "공유경제 (Sharing Economy)"),
    ("23", "S3"),
    ("24", "PV (Page View)"),
    ("25", "CEO"),
    ("26", "UX Writing"),
    ("27", "SBA(Seoul Business Agency)"),
    ("28", "로우 데이터(Raw data)"),
    ("29", "AWS Credit"),
    ("30", "해커톤 (Hackathon)"),
    ("31", "썸네일"),
    ("32", "GUI"),
    ("33", "하이브리드 앱(Hybrid app)"),
    ("34", "R&R (Role&Responsibility)"),
    ("35", "마일스톤"),
    ("36", "누끼"),
    ("37", "리엑트 네이티브"),
    ("38", "이슈 티켓"),
    ("39", "마일스톤 (Milestone)"),
    ("40", "CPO(Chief Product Officer)"),
    ("41", "베타 서비스(Beta Service)"),
    ("42", "VR(Virtual Reality)"),
    ("43", "RDS"),
    ("44", "시드머니"),
    ("45", "레퍼런스"),
    ("46", "이커머스"),
    ("47", "피봇 (Pivot)"),
    ("48", "스콥 (scope)"),
    ("49", "그리드"),
    ("50", "토스트 메세지"),
    ("51", "forwarding"),
    ("52", "배포(Software Distribution)"),
    ("53", "BX"),
    ("54", "임팩트 투자 (Impact Investment)"),
    ("55", "인스턴스(AWS)"),
    ("56", "푸터"),
    ("57", "MAU (Monthly Active Users)"),
    ("58", "애자일(Agile)"),
    ("59", "VOC(Voice Of Customer)"),
    ("60", "NPS"),
    ("61", "하이브리드 강연"),
    ("62", "자금조달"),
    ("63", "APK"),
    ("64", "CTA (Call To Action)"),
    ("65", "CFO(Chief Financial Officer)"),
    ("66", "스프린트(Sprint)"),
    ("67", "데모데이"),
    ("68", "넛지"),
    ("69", "Node.js"),
    ("70", "세그먼테이션 (segmentation)"),
    ("71", "SI (System Integration)"),
    ("72", "UI"),
    ("73", "턴키 방식"),
    ("74", "퍼포먼스 마케팅"),
    ("75", "PoC(Proof Of Concept)"),
    ("76", "라이브러리(Library)"),
    ("77", "Azure"),
    ("78", "Nest.js"),
    ("79", "어레인지 (arrange)"),
    ("80", "Request for Proposal (RFP)"),
    ("81", "PL(피엘)"),
    ("82", "CX(Customer Experience)"),
    ("83", "스프링 (Spring)"),
    ("84", "인스턴트(Instant)"),
    ("85", "유효성 검사"),
    ("86", "텍스트 박스"),
    ("87", "플러터 (Flutter)"),
    ("88", "피치 덱 (Pitch Deck)"),
    ("89", "전략적 투자 (SI, Strategic Investment)"),
    ("90", "랜딩 페이지"),
    ("91", "디자인 토큰"),
    ("92", "아이콘"),
    ("93", "얼라인 (align)"),
    ("94", "CPA (Cost per Action)"),
    ("95", "PSD 파일"),
    ("96", "스톡옵션"),
    ("97", "온보딩 (Onboarding)"),
    ("98", "사용성 테스트"),
    ("99", "CS율"),
    ("100", "SaaS(Software-as-a-Service)"),
    ("101", "데이터베이스(Database) 서버"),
    ("102", "밸류에이션 (Valuation)"),
    ("103", "온디맨드 (on demand)"),
    ("104", "페이드미디어 (Paid Media)"),
    ("105", "Design-Font(디자인 폰트)"),
    ("106", "펀딩"),
    ("107", "백엔드(Back-end)"),
    ("108", "이탈률"),
    ("109", "인큐베이션(Incubation)"),
    ("110", "WBS (Work Breakdown Structure)"),
    ("111", "CV (Consumer value)"),
    ("112", "F/U (Follow Up)"),
    ("113", "팝업"),
    ("114", "데스벨리"),
    ("115", "RTB (Real Time Bidding)"),
    ("116", "Request for Quotation (RFQ)"),
    ("117", "리드(Lead)"),
    ("118", "SSL"),
    ("119", "써드파티"),
    ("120", "QC (Quality Control)"),
    ("121", "컬럼"),
    ("122", "System-Font(시스템폰트)"),
    ("123", "레거시"),
    ("124", "STP"),
    ("125", "가비아"),
    ("126", "피그마"),
    ("127", "PIC (Person In Charge)"),
    ("128", "컨펌"),
    ("129", "MySQL"),
    ("130", "서버(Server)"),
    ("131", "액셀러레이션(Acceleration)"),
    ("132", "CMYK"),
    ("133", "코즈 마케팅"),
    ("134", "COO(Chief operating office)"),
    ("135", "린하게 하자"),
    ("136", "R&D"),
    ("137", "토큰"),
    ("138", "후이즈"),
    ("139", "LNB"),
    ("140", "GNB"),
    ("141", "BMC"),
    ("142", "CR(Change Request)"),
    ("143", "UAT (User Acceptance Testing)"),
    ("144", "QA (Quality Assurance)"),
    ("145", "CMO(Chief Marketing Officer)"),
    ("146", "얼럼나이"),
    ("147", "ICE Score Framework"),
    ("148", "시리즈 A"),
    ("149", "프로그레스 바"),
    ("150", "B2G (business-to-government)"),
    ("151", "프로토타입"),
    ("152", "톤앤매너 (tone & manner)"),
    ("153", "파이썬(Python)"),
    ("154", "SQL(Structured Query Language)"),
    ("155", "Repo"),
    ("156", "네이티브앱 (Native app)"),
    ("157", "CPC(Cost per Click)"),
    ("158", "B2B(business-to-business)"),
    ("159", "CS"),
    ("160", "GCP"),
    ("161", "킥오프 (kickoff)"),
    ("162", "SEO (검색 엔진 최적화)"),
    ("163", "타입스크립트(Typescript)"),
    ("164", "SMB(Server Message Block)"),
    ("165", "파트너사"),
    ("166", "워크플로 (Workflow)"),
    ("167", "BNB(바텀 네비게이션 바)"),
    ("168", "릴리즈 (release)"),
    ("169", "SA (Search Advertising)"),
    ("170", "Role"),
    ("171", "AR(Augmented Reality)"),
    ("172", "도커 (Docker)"),
    ("173", "라우팅"),
    ("174", "라이센싱 (Licensing)"),
    ("175", "맨먼스 방식"),
    ("176", "라이센스 비즈니스"),
    ("177", "개발서버"),
    ("178", "스위프트(Swift)"),
    ("179", "칸반보드"),
    ("180", "JWT"),
    ("181", "CSV (Creating Shared Value)"),
    ("182", "CPM(Cost per Mille)"),
    ("183", "자바스크립트(Javascript)"),
    ("184", "백로그(backlog)"),
    ("185", "스프린트 백로그(Sprint Backlog)"),
    ("186", "CRUD"),
    ("187", "OKR(Objective and Key results)"),
    ("188", "도메인"),
    ("189", "ERD(Entity Relationship Diagram)"),
    ("190", "어피니티 다이어그램 (Affinity Diagram)"),
    ("191", "D2C (Direct to Customer)"),
    ("192", "PaaS(Platform as a Service)"),
    ("193", "어드민"),
    ("194", "호스팅"),
    ("195", "README"),
    ("196", "타이포그래피"),
    ("197", "인바운드"),
    ("198", "잡스토리(Job story)"),
    ("199", "오픈소스(Open Source)"),
    ("200", "리드 타임 (Lead Time)"),
    ("201", "클라이언트 개발자"),
    ("202", "재무적 투자 (FI, Financial Investment)"),
    ("203", "스테이지 서버"),
    ("204", "머지"),
    ("205", "테스트플라이트"),
    ("206", "IR"),
    ("207", "웹 브라우저"),
    ("208", "부트스트래핑"),
    ("209", "니치 마케팅 (Niche Marketing)"),
    ("210", "코워킹 스페이스 (Co-Working Space)"),
    ("211", "스토리보드 (Story Board)"),
    ("212", "에셋"),
    ("213", "핵토콘"),
    ("214", "백엔드 프로그래머"),
    ("215", "CDO(Chief Digital Officer)"),
    ("216", "컴포넌트(component)"),
    ("217", "IaaS(Infrastructure as a Service)"),
    ("218", "모객"),
    ("219", "레이아웃"),
    ("220", "DA (Display Ad)"),
    ("221", "CPV (Cost Per View)"),
    ("222", "DAU (Daily Active Users)"),
    ("223", "B2C(business-to-customer)"),
    ("224", "코딩 테스트"),
    ("225", "스케일업 (Scale-Up)"),
    ("226", "RGB"),
    ("227", "IPO (Initial Public Offering)"),
    ("228", "운영서버"),
    ("229", "카피라이팅"),
    ("230", "Redis"),
    ("231", "IP 주소"),
    ("232", "레거시 (legacy)"),
    ("233", "involve"),
    ("234", "컨버젼 (Conversion)"),
    ("235", "데이터파이프라인(Data Pipeline)"),
    ("236", "펌웨어(Firmware)"),
    ("237", "AWS"),
    ("238", "보통주"),
    ("239", "parallel"),
    ("240", "PMF (Product/Market Fit)"),
    ("241", "리젝 사유"),
    ("242", "제품 백로그(Product Backlog)"),
    ("243", "API(Application Programming Interface)"),
    ("244", "딥다이브"),
    ("245", "구독경제 (Subscription Economy)"),
    ("246", "데카콘"),
    ("247", "구독 결제"),
    ("248", "TBD (To be determined)"),
    ("249", "CRM 마케팅"),
    ("250", "CTR (Click Through Rate)"),
    ("251", "CPI (Cost Per Installation)"),
    ("252", "로아스 (ROAS)"),
    ("253", "ROI"),
    ("254", "오가닉트래픽 (Organic Traffic)"),
    ("255", "온드 미디어 (Owned Media)"),
    ("256", "컴포넌트"),
    ("257", "유니콘"),
    ("258", "CC"),
    ("259", "비즈니스 피봇"),
    ("260", "코호트"),
    ("261", "블록체인(Blockchain)"),
    ("262", "UX"),
    ("263", "유니버설 디자인"),
    ("264", "UV (Unique Visitor)"),
    ("265", "프론트엔드 프로그래머"),
    ("266", "게임 프로그래머"),
    ("267", "데이터베이스관리자(Database Administrator)"),
    ("268", "데이터사이언티스트(Data Scientist)"),
    ("269", "데브옵스 엔지니어 (DevOps Engineer)"),
    ("270", "자바(Java)"),
    ("271", "코틀린(Kotlin)"),
    ("272", "오브젝티브씨(Objective-C)"),
    ("273", "CTO(Chief Technology Officer)"),
    ("274", "워터폴 모델(Waterfall Model)"),
    ("275", "스크럼(Scrum)"),
    ("276", "PM(피엠)"),
    ("277", "TFT(티 에프 티)"),
    ("278", "어도비 XD"),
    ("279", "오픈마켓"),
    ("280", "자간,행간"),
    ("281", "언드미디어 (Earned Media)"),
    ("282", "풀스택 프로그래머(Full-Stack Programmer)"),
    ("283", "AS-IS(에즈이즈), TO-BE(투비)"),
    ("284", "아웃바운드"),
    ("285", "404 ERROR(사공사 에러)"),
    ("286", "Web-Font(웹 폰트)"),
    ("287", "올라운더"),
    ("288", "프로토타이핑(Prototyping)"),
    ("289", "프레임워크(Framework)"),
    ("290", "포스트 머니"),
    ("291", "소셜커머스"),
    ("292", "알파 출시"),
    ("293", "사용자스토리(User Story)"),
    ("294", "모듈(Module)"),
    ("295", "스타트업(start-up)"),
    ("296", "KPI"),
    ("297", "R&R"),
    ("298", "피드백"),
    ("299", "회고"),
    ("300", "클라우드(Cloud) 컴퓨팅"),
    ("301", "프론트엔드(Front-end)"),
    ("302", "운영체제(Operating System)"),
    ("303", "관계형데이터베이스(Relational Database Management System)"),
    ("304", "테이블(Table)"),
    ("305", "NoSQL"),
    ("306", "Git"),
    ("307", "EC2"),
    ("308", "메모리"),
    ("309", "SG"),
    ("310", "그로스 해킹"),
    ("311", "맨먼스"),
    ("312", "BEP (Break-Even Point)"),
    ("313", "시리즈 B"),
    ("314", "투자 회수(Exit)"),
    ("315", "인수합병(Merger and Acquisition, M&A)"),
    ("316", "랜딩페이지 (Landing Page)"),
    ("317", "스타일가이드"),
    ("318", "서드파티"),
    ("319", "그로스 해킹"),
    ("320", "스켈레톤"),
    ("321", "SM(에스엠)"),
    ("322", "클라이언트(Client)"),
    ("323", "아웃소싱 (Outsourcing)"),
    ("324", "static"),
    ("325", "애프터마켓 (After Market)"),
    ("326", "업사이클 (Up-cycle)"),
    ("327", "MCN (Multi Channel Network)"),
    ("328", "캐즘 (Chasm)"),
    ("329", "맨파워"),
)

_BY_ID: dict[str, str] = dict(TERMS)


def find_term(term_id: str) -> str | None:
    return _BY_ID.get(str(term_id))


def search_terms(query: str) -> list[tuple[str, str]]:
    """Case-insensitive substring search over the labels."""
    needle = (query or "").strip().lower()
    if not needle:
        return list(TERMS)
    return [(term_id, label) for term_id, label in TERMS if needle in label.lower()]
