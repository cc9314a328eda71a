"""Static known top-level-domain table.

Labels from the IANA root zone: the legacy generic and sponsored
TLDs, ``arpa``, every ISO 3166 country code in delegation, and the
widely-used new gTLDs. Stored lowercase; lookups are case-insensitive.
Callers needing a different list pass their own table to the validator.
"""

from __future__ import annotations

from collections.abc import Collection

_GENERIC = """
aero arpa asia biz cat com coop edu gov info int jobs mil mobi museum name
net org post pro tel travel xxx
"""

_COUNTRY_CODES = """
ac ad ae af ag ai al am ao aq ar as at au aw ax az
ba bb bd be bf bg bh bi bj bm bn bo bq br bs bt bw by bz
ca cc cd cf cg ch ci ck cl cm cn co cr cu cv cw cx cy cz
de dj dk dm do dz
ec ee eg er es et eu
fi fj fk fm fo fr
ga gb gd ge gf gg gh gi gl gm gn gp gq gr gs gt gu gw gy
hk hm hn hr ht hu
id ie il im in io iq ir is it
je jm jo jp
ke kg kh ki km kn kp kr kw ky kz
la lb lc li lk lr ls lt lu lv ly
ma mc md me mg mh mk ml mm mn mo mp mq mr ms mt mu mv mw mx my mz
na nc ne nf ng ni nl no np nr nu nz
om
pa pe pf pg ph pk pl pm pn pr ps pt pw py
qa
re ro rs ru rw
sa sb sc sd se sg sh si sk sl sm sn so sr ss st su sv sx sy sz
tc td tf tg th tj tk tl tm tn to tr tt tv tw tz
ua ug uk us uy uz
va vc ve vg vi vn vu
wf ws
ye yt
za zm zw
"""

_NEW_GENERIC = """
academy accountant accountants actor adult agency airforce amsterdam app
apartments army art associates attorney auction audio auto autos baby band
bank bar barcelona bargains beer berlin best bet bible bid bike bingo bio
black blog blue boats bond boston boutique broker build builders business
buzz cab cafe cam camera camp capital car cards care career careers cars
casa cash casino catering center ceo charity chat cheap christmas church
city claims cleaning click clinic clothing cloud club coach codes coffee
college community company compare computer condos construction consulting
contractors cooking cool country coupons courses credit creditcard cricket
cruises cymru dance data date dating deals degree delivery democrat dental
dentist design dev diamonds diet digital direct directory discount doctor
dog domains download earth eco education email energy engineer engineering
enterprises equipment estate eus events exchange expert exposed express
fail faith family fan fans farm fashion fast film finance financial fish
fishing fit fitness flights florist flowers football forsale foundation
free fun fund furniture futbol fyi gallery game games garden gay gift
gifts gives glass global gmbh gold golf graphics gratis green gripe group
guide guitars guru hair hamburg health healthcare help hiphop hockey
holdings holiday homes horse hospital host hosting hot house how icu immo
inc industries ink institute insure international investments irish
jewelry juegos kaufen kim kitchen kiwi land lat law lawyer lease legal
lgbt life lighting limited limo link live llc llp loan loans lol london
love ltd luxury maison management market marketing mba media memorial men
menu miami moda moe mom money mortgage motorcycles mov movie music network
new news ngo ninja nyc observer one ong onl online ooo organic page paris
partners parts party pet phd photo photography photos pics pictures pink
pizza place plumbing plus poker porn press productions prof promo
properties property protection pub quebec quest racing radio realestate
realty recipes red rehab reise reisen rent rentals repair report
republican rest restaurant review reviews rich rip rocks rodeo rsvp rugby
run sale salon sarl school schule science scot security services sex sexy
shoes shop shopping show singles site ski skin soccer social software
solar solutions space spa sport store stream studio study style sucks
supplies supply support surf surgery swiss sydney systems taipei tattoo
tax taxi team tech technology tennis theater theatre tickets tips tires
tokyo today tools top tours town toys trade trading training tube
university uno vacations vegas ventures vet viajes video villas vin vip
vision vodka vote voting voto voyage wales wang watch webcam website
wedding wien wiki win wine work works world wtf xyz yoga zone
"""

KNOWN_TLDS: frozenset[str] = frozenset(
    (_GENERIC + _COUNTRY_CODES + _NEW_GENERIC).split()
)


def is_known_tld(label: str, table: Collection[str] = KNOWN_TLDS) -> bool:
    """Return True if *label* is in *table*, ignoring case.

    *table* must hold lowercase labels.
    """
    if not label:
        return False
    return label.lower() in table
